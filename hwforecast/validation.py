# packages
import logging


logger = logging.getLogger(__name__)


def validate(alpha, beta, gamma, m, period):
    """
    Check smoothing factors and forecast horizon before any computation.

    Parameters
    ----------
    alpha : float
        Level smoothing factor.
    beta : float
        Season smoothing factor.
    gamma : float
        Trend smoothing factor.
    m : int
        Number of steps ahead to forecast.
    period : int
        Number of samples in a season.

    Returns
    -------
    valid : bool
        True if the parameters can be used for forecasting.

    """

    if m <= 0 or m > period:
        logger.debug('Rejected horizon m=%s for period=%s.', m, period)
        return False

    for name, value in (('alpha', alpha), ('beta', beta), ('gamma', gamma)):
        if not 0 <= value <= 1:
            logger.debug('Rejected %s=%s, outside [0, 1].', name, value)
            return False

    return True
