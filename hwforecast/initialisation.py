# project
import hwforecast.helpers as hlp


def initial_trend(period, data):
    """
    Estimate the starting trend from the first two seasons.

    Averages the season-to-season change over the first period and
    scales it down to one sample. Terms that reach past the end of
    data contribute zero.

    Parameters
    ----------
    period : int
        Number of samples in a season.
    data : list
        Observations.

    Returns
    -------
    trend : float
        Initial trend estimate.

    """

    total = 0.0
    for i in range(period):
        if i + period < len(data):
            total += data[i + period] - data[i]

    return total / period**2


def seasonal_indices(period, seasons, data):
    """
    Estimate one multiplicative seasonal index per position in a season.
    Based on: https://robjhyndman.com/hyndsight/hw-initialization/

    Parameters
    ----------
    period : int
        Number of samples in a season.
    seasons : int
        Number of seasons in data, used as divisor for the position averages.
    data : list
        Observations.

    Returns
    -------
    indices : list
        Seasonal indices, exactly period long.

    """

    # normalise every season by its own average
    averages  = hlp.average_per_chunk(period, hlp.chunk(period, data))
    detrended = hlp.detrend(period, data, averages)

    # collect values sharing the same position in season
    positions = hlp.transpose(hlp.chunk(period, detrended))

    # positions never reached by data
    positions += [[] for _ in range(period - len(positions))]

    return [sum(p) / seasons for p in positions]
