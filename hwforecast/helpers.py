# packages
import numpy  as np
import pandas as pd


class DegenerateSeriesError(ArithmeticError):
    """
    Raised when the multiplicative model would have to divide by zero.

    """


def chunk(size, seq):
    """
    Split a sequence into consecutive, non-overlapping chunks.

    Parameters
    ----------
    size : int
        Number of elements in each chunk.
    seq : list
        Sequence to be split.

    Returns
    -------
    chunks : list
        List of chunks. The last chunk is shorter if len(seq) is not a multiple of size.

    """

    return [list(seq[i:i + size]) for i in range(0, len(seq), size)]


def average_per_chunk(size, chunks):
    """
    Average each chunk over the nominal chunk size.

    A short trailing chunk is still divided by size, not by its own length.

    Parameters
    ----------
    size : int
        Nominal chunk size.
    chunks : list
        List of chunks as returned by chunk().

    Returns
    -------
    averages : list
        One average per chunk.

    """

    return [sum(c) / size for c in chunks]


def detrend(period, data, chunk_averages):
    """
    Divide each observation by the average of the chunk it falls in.

    Parameters
    ----------
    period : int
        Number of observations per chunk.
    data : list
        Observations.
    chunk_averages : list
        One average per chunk of data.

    Returns
    -------
    detrended : list
        Observations scaled by their chunk average.

    """

    # broadcast each average over its chunk
    broadcast = [avg for avg in chunk_averages for _ in range(period)]

    detrended = []
    for value, avg in zip(data, broadcast):
        if avg == 0:
            raise DegenerateSeriesError('Chunk average is zero, cannot detrend.')
        detrended.append(value / avg)

    return detrended


def transpose(rows):
    """
    Group values by their position within each row.

    Rows may have different lengths, a column only collects
    values from the rows that are long enough to have it.

    Parameters
    ----------
    rows : list
        List of lists.

    Returns
    -------
    columns : list
        Column i contains row[i] of every row, in row order.

    """

    n_columns = max([len(row) for row in rows], default=0)

    return [[row[i] for row in rows if len(row) > i] for i in range(n_columns)]


def as_float_list(data):
    """
    Convert array_like observations to a list of python floats.

    Parameters
    ----------
    data : array_like
        List, numpy array or pandas Series of observations.

    Returns
    -------
    values : list
        Observations as floats.

    Raises
    ------
    ValueError
        If data is not one dimensional.

    """

    values = np.asarray(data, dtype=float)
    if values.ndim != 1:
        raise ValueError('Observations must be one dimensional, got shape {}.'.format(values.shape))

    return values.tolist()


def extend_index(index, n):
    """
    Extend an index n steps into the future using its average step length.

    Parameters
    ----------
    index : pandas.Index
        Index of the observed series.
    n : int
        Number of steps to append.

    Returns
    -------
    extended : pandas.Index
        Original index followed by n extrapolated labels.

    """

    # nothing to extrapolate from
    if n <= 0:
        return index
    # no step length, fall back to sample positions
    if len(index) < 2:
        return pd.RangeIndex(len(index) + n)

    # plain positional index
    if isinstance(index, pd.RangeIndex):
        return pd.RangeIndex(index.start, index.start + (len(index) + n)*index.step, index.step)

    # use average step length
    if isinstance(index, pd.DatetimeIndex):
        step = (index[-1] - index[0]) / (len(index) - 1)
        future = pd.DatetimeIndex([index[-1] + (t+1)*step for t in range(n)])
        return index.append(future)

    if pd.api.types.is_numeric_dtype(index):
        values = np.asarray(index, dtype=float)
        step = np.mean(values[1:] - values[:-1])
        future = values[-1] + step*np.arange(1, n+1)
        return pd.Index(np.concatenate([values, future]))

    # labels that cannot be extrapolated
    return pd.RangeIndex(len(index) + n)
