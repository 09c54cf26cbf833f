# packages
import math
import logging
import numpy  as np
import pandas as pd

# project
import hwforecast.config.parameters as prm
import hwforecast.helpers           as hlp
import hwforecast.initialisation    as ini
from   hwforecast.validation        import validate
from   hwforecast.smoother          import Smoother
from   hwforecast.helpers           import DegenerateSeriesError


logger = logging.getLogger(__name__)


def _count_seasons(n_samples, period):
    # round half up, never zero
    return max(1, math.floor(n_samples / period + 0.5))


def _smooth(alpha, beta, gamma, m, period, data):
    """
    Validate, initialise and run the recursion.

    Parameters
    ----------
    alpha, beta, gamma : float
        Level, season and trend smoothing factors.
    m : int
        Number of steps ahead to forecast.
    period : int
        Number of samples in a season.
    data : array_like
        Observations.

    Returns
    -------
    smoother : Smoother
        Smoother after iterating all samples, None if input is invalid.

    """

    if not validate(alpha, beta, gamma, m, period):
        return None

    values = hlp.as_float_list(data)
    if len(values) == 0:
        logger.debug('Rejected empty data.')
        return None

    # initial season and trend from full history
    seasons  = _count_seasons(len(values), period)
    smoother = Smoother(alpha, beta, gamma, m, period)
    try:
        season = ini.seasonal_indices(period, seasons, values)
        trend  = ini.initial_trend(period, values)
        smoother.run(values, trend, season)
    except DegenerateSeriesError as e:
        logger.warning('No forecast for degenerate series: %s', e)
        return None

    return smoother


def forecast_with(alpha, beta, gamma, m, period, data):
    """
    Multiplicative Holt-Winters forecast with given smoothing factors.

    Parameters
    ----------
    alpha : float
        Level smoothing factor in [0, 1].
    beta : float
        Season smoothing factor in [0, 1].
    gamma : float
        Trend smoothing factor in [0, 1].
    m : int
        Number of steps ahead to forecast, 0 < m <= period.
    period : int
        Number of samples in a season.
    data : array_like
        Observations in time order.

    Returns
    -------
    forecast : numpy.ndarray
        len(data) + m values, aligned with data. The first m + 2 values are zero.
        None if parameters or data are invalid.

    """

    smoother = _smooth(alpha, beta, gamma, m, period, data)
    if smoother is None:
        return None

    # pad so that forecasts line up with the samples they predict
    padding  = np.zeros(m + prm.n_seed_samples)
    forecast = np.concatenate([padding, np.array(smoother.model['forecast'], dtype=float)])

    # a single sample leaves no room for the full padding
    return forecast[:smoother.n_samples + m]


def forecast(period, data):
    """
    Forecast one season ahead with default smoothing factors.

    Parameters
    ----------
    period : int
        Number of samples in a season.
    data : array_like
        Observations in time order.

    Returns
    -------
    forecast : numpy.ndarray
        See forecast_with(). None if input is invalid.

    """

    return forecast_with(prm.alpha, prm.beta, prm.gamma, period, period, data)


def forecast_series(series, period, alpha=prm.alpha, beta=prm.beta, gamma=prm.gamma, m=None):
    """
    Forecast a pandas Series, extending its index m steps into the future.

    Parameters
    ----------
    series : pandas.Series
        Observations in time order.
    period : int
        Number of samples in a season.
    alpha, beta, gamma : float
        Level, season and trend smoothing factors.
    m : int
        Number of steps ahead to forecast. Defaults to period.

    Returns
    -------
    forecast : pandas.Series
        Forecast aligned with the extended index. None if input is invalid.

    """

    if m is None:
        m = period
    if not isinstance(series, pd.Series):
        series = pd.Series(series)

    values = forecast_with(alpha, beta, gamma, m, period, series)
    if values is None:
        return None

    index = hlp.extend_index(series.index, m)

    return pd.Series(values, index=index, name=prm.forecast_name)


def components(data, period, alpha=prm.alpha, beta=prm.beta, gamma=prm.gamma, m=None):
    """
    Level, trend, season and forecast of every iterated sample.

    Parameters
    ----------
    data : array_like
        Observations in time order.
    period : int
        Number of samples in a season.
    alpha, beta, gamma : float
        Level, season and trend smoothing factors.
    m : int
        Number of steps ahead to forecast. Defaults to period.

    Returns
    -------
    frame : pandas.DataFrame
        One row per sample from index 2, season is nan where no
        seasonal index was appended. None if input is invalid.

    """

    if m is None:
        m = period

    smoother = _smooth(alpha, beta, gamma, m, period, data)
    if smoother is None:
        return None

    model = dict(smoother.model)
    index = pd.Index(model.pop('index'), name='sample')

    return pd.DataFrame(model, index=index, columns=['observed', 'level', 'trend', 'season', 'forecast'])
