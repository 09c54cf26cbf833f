"""
Tests for parameter validation and the public forecast entry points.
"""

import unittest
import numpy  as np
import pandas as pd

import hwforecast
from hwforecast import validate, forecast, forecast_with, forecast_series, components
from hwforecast.forecaster     import _count_seasons
from hwforecast.initialisation import initial_trend, seasonal_indices
from hwforecast.smoother       import Smoother


DATA = [10, 20, 30, 40, 12, 22, 32, 42]


class TestValidate(unittest.TestCase):

    def test_accepts_bounds(self):
        self.assertTrue(validate(0, 0, 0, 1, 1))
        self.assertTrue(validate(1, 1, 1, 4, 4))

    def test_rejects_horizon(self):
        self.assertFalse(validate(0.5, 0.4, 0.6, 0, 4))
        self.assertFalse(validate(0.5, 0.4, 0.6, -1, 4))
        self.assertFalse(validate(0.5, 0.4, 0.6, 5, 4))

    def test_rejects_smoothing_factors(self):
        for params in [(1.5, 0.4, 0.6), (0.5, -0.1, 0.6), (0.5, 0.4, 1.01), (float('nan'), 0.4, 0.6)]:
            self.assertFalse(validate(*params, 2, 4), params)


class TestForecastWith(unittest.TestCase):

    def test_alpha_out_of_range(self):
        self.assertIsNone(forecast_with(1.5, 0.4, 0.6, 2, 4, [1, 2, 3, 4, 5, 6, 7, 8]))

    def test_horizon_beyond_period(self):
        self.assertIsNone(forecast_with(0.5, 0.4, 0.6, 5, 4, [1, 2, 3, 4, 5, 6, 7, 8]))

    def test_empty_data(self):
        self.assertIsNone(forecast_with(0.5, 0.4, 0.6, 2, 4, []))
        self.assertIsNone(forecast(4, []))
        self.assertIsNone(forecast(4, np.array([])))

    def test_length_and_padding(self):
        for m in (1, 2, 3, 4):
            result = forecast_with(0.5, 0.4, 0.6, m, 4, DATA)
            self.assertEqual(len(result), len(DATA) + m)
            np.testing.assert_array_equal(result[:m + 2], np.zeros(m + 2))

    def test_single_sample(self):
        result = forecast_with(0.5, 0.4, 0.6, 2, 4, [3.0])
        self.assertEqual(len(result), 3)
        np.testing.assert_array_equal(result, np.zeros(3))

    def test_shorter_than_period(self):
        result = forecast_with(0.5, 0.4, 0.6, 3, 12, [5.0, 6.0, 7.0])
        self.assertEqual(len(result), 6)
        self.assertTrue(np.all(np.isfinite(result)))

    def test_half_season_count_rounds_up(self):
        # 10 samples over period 4 is 2.5 seasons, counted as 3
        data = [10.0, 20.0, 30.0, 40.0, 12.0, 22.0, 32.0, 42.0, 14.0, 24.0]
        self.assertEqual(_count_seasons(10, 4), 3)
        self.assertEqual(_count_seasons(6, 4), 2)
        self.assertEqual(_count_seasons(1, 4), 1)

        season = seasonal_indices(4, 3, data)
        smoother = Smoother(0.5, 0.4, 0.6, 4, 4)
        expected = smoother.run(data, initial_trend(4, data), season)
        np.testing.assert_array_equal(forecast(4, data)[6:], expected)

        # position 0 averages 10/25, 12/27 and 14/(38/4) over 3 seasons
        self.assertAlmostEqual(season[0], (10/25 + 12/27 + 14/9.5) / 3)

    def test_degenerate_series(self):
        self.assertIsNone(forecast(4, [0.0]*8))

    def test_accepts_series_and_arrays(self):
        expected = forecast(4, DATA)
        np.testing.assert_array_equal(forecast(4, np.array(DATA)), expected)
        np.testing.assert_array_equal(forecast(4, pd.Series(DATA)), expected)


class TestForecast(unittest.TestCase):

    def setUp(self):
        self.result = forecast(4, DATA)

    def test_scenario(self):
        self.assertEqual(len(self.result), 12)
        np.testing.assert_array_equal(self.result[:6], np.zeros(6))
        self.assertTrue(np.all(np.isfinite(self.result[6:])))

    def test_golden_values(self):
        self.assertAlmostEqual(self.result[6], 2939.86/54, places=9)
        self.assertAlmostEqual(self.result[7], 6371.256/54, places=9)

    def test_matches_default_parameters(self):
        np.testing.assert_array_equal(self.result, forecast_with(0.5, 0.4, 0.6, 4, 4, DATA))

    def test_deterministic(self):
        np.testing.assert_array_equal(self.result, forecast(4, DATA))

    def test_package_exports(self):
        self.assertIs(hwforecast.forecast, forecast)
        self.assertIs(hwforecast.forecast_with, forecast_with)


class TestPandas(unittest.TestCase):

    def test_forecast_series_datetime_index(self):
        series = pd.Series(DATA, index=pd.date_range('2021-01-01', periods=8, freq='h'))
        result = forecast_series(series, 4)
        self.assertEqual(len(result), 12)
        self.assertEqual(result.name, 'forecast')
        self.assertEqual(result.index[-1], pd.Timestamp('2021-01-01 11:00'))
        np.testing.assert_array_equal(result.values, forecast(4, DATA))

    def test_forecast_series_custom_horizon(self):
        result = forecast_series(pd.Series(DATA), 4, m=2)
        self.assertEqual(list(result.index), list(range(10)))

    def test_forecast_series_invalid(self):
        self.assertIsNone(forecast_series(pd.Series(DATA), 4, alpha=2.0))

    def test_components(self):
        frame = components(DATA, 4)
        self.assertEqual(list(frame.columns), ['observed', 'level', 'trend', 'season', 'forecast'])
        self.assertEqual(list(frame.index), list(range(2, 8)))
        self.assertEqual(frame.index.name, 'sample')
        np.testing.assert_array_equal(frame['forecast'].values, forecast(4, DATA)[6:])
        self.assertEqual(frame['season'].isna().sum(), 2)

    def test_components_invalid(self):
        self.assertIsNone(components([], 4))


if __name__ == '__main__':
    unittest.main()
