# packages
import logging
import numpy as np

# project
from hwforecast.helpers import DegenerateSeriesError
import hwforecast.config.parameters as prm


logger = logging.getLogger(__name__)


class Smoother():
    """
    Multiplicative Holt-Winters recursion over a full history.
    It keeps track of level, trend and the growing seasonal vector between samples.
    A new Smoother should be created for every forecast.
    """

    def __init__(self, alpha, beta, gamma, m, period):
        # give to self
        self.alpha  = alpha
        self.beta   = beta
        self.gamma  = gamma
        self.m      = m
        self.period = period

        # contains level, trend and season for every iterated sample
        self.model = {
            'index':    [], # sample index in data
            'observed': [], # observed values
            'level':    [], # modeled level
            'trend':    [], # modeled trend
            'season':   [], # appended seasonal index, nan if none
            'forecast': [], # m-step ahead forecast made at sample
        }

        # state
        self.n_samples = 0
        self.level     = None
        self.trend     = None
        self.season    = []


    def run(self, data, trend, season):
        """
        Iterate Holt-Winters over data and collect one forecast per sample.

        Parameters
        ----------
        data : list
            Observations as floats.
        trend : float
            Initial trend.
        season : list
            Initial seasonal indices, one per position in season.

        Returns
        -------
        forecast : list
            Forecasts in chronological order, one per sample from index 2.

        """

        # seed state
        self.n_samples = len(data)
        self.level     = data[0]
        self.trend     = trend
        self.season    = list(season)

        # the seed samples are never forecast
        for index in range(prm.n_seed_samples, len(data)):
            self.__iterate_holt_winters(index, data[index])
            self.__model_forecast(index)

        logger.debug('Iterated %d samples, %d seasonal indices.', len(self.model['forecast']), len(self.season))

        return self.model['forecast']


    def __lookup_season(self, i):
        """
        Seasonal index at absolute position i, zero if it does not exist.

        Parameters
        ----------
        i : int
            Position in the seasonal vector.

        Returns
        -------
        s : float
            Seasonal index.

        """

        if 0 <= i < len(self.season):
            return self.season[i]
        return 0


    def __iterate_holt_winters(self, index, value):
        """
        Update level, trend and seasonal component of Holt-Winters model.

        Parameters
        ----------
        index : int
            Position of value in data.
        value : float
            Observation at index.

        """

        seasonal = index - self.period >= 0
        past     = self.__lookup_season(index - self.period)

        # level (l)
        if seasonal:
            if past == 0:
                raise DegenerateSeriesError('Seasonal index at {} is zero.'.format(index - self.period))
            l = self.alpha*value/past + (1 - self.alpha)*(self.level + self.trend)
        else:
            l = self.alpha*value + (1 - self.alpha)*(self.level + self.trend)

        # trend (b)
        b = self.gamma*(l - self.level) + (1 - self.gamma)*self.trend

        # season (s), only once a full season is behind
        s = np.nan
        if seasonal:
            if l == 0:
                raise DegenerateSeriesError('Level at {} is zero.'.format(index))
            s = self.beta*value/l + (1 - self.beta)*past
            self.season.append(s)

        # update state
        self.level = l
        self.trend = b

        # append components
        self.model['index'].append(index)
        self.model['observed'].append(value)
        self.model['level'].append(l)
        self.model['trend'].append(b)
        self.model['season'].append(s)


    def __model_forecast(self, index):
        """
        Holt-Winters m-step ahead forecast from the current state.

        Parameters
        ----------
        index : int
            Position of the most recent sample in data.

        """

        future = self.__lookup_season(index - self.period + self.m)
        self.model['forecast'].append((self.level + self.m*self.trend) * future)
