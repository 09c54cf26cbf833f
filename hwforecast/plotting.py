# packages
import numpy             as np
import matplotlib.pyplot as plt

# project
import hwforecast.config.styling as stl


def plot_forecast(data, forecast, ax=None):
    """
    Plot observations and forecast on a shared sample axis.

    Parameters
    ----------
    data : array_like
        Observations.
    forecast : array_like
        Output of forecast_with(), len(data) + m long.
    ax : matplotlib.axes.Axes
        Axis to draw on. A new figure is created if None.

    Returns
    -------
    ax : matplotlib.axes.Axes
        Axis with the plot.

    """

    if ax is None:
        _, ax = plt.subplots(1, 1)

    data     = np.asarray(data, dtype=float)
    forecast = np.asarray(forecast, dtype=float)

    ax.plot(np.arange(len(data)), data, color=stl.OB[1], linewidth=stl.lw, label='Observed')
    ax.plot(np.arange(len(forecast)), forecast, color=stl.MO[1], linewidth=stl.lw, linestyle='--', label='Forecast')
    ax.axvline(len(data) - 1, color='k', linestyle='--', label='Last Sample')
    ax.legend(loc='upper left')
    ax.set_xlabel('Sample')
    ax.set_ylabel('Value')

    return ax


def plot_components(frame, axes=None):
    """
    Plot observed data, level, trend and season in stacked axes.

    Parameters
    ----------
    frame : pandas.DataFrame
        Output of components().
    axes : list
        Four axes to draw on. A new figure is created if None.

    Returns
    -------
    axes : list
        Axes with the plots.

    """

    if axes is None:
        _, axes = plt.subplots(4, 1, sharex=True)

    for i, (column, label) in enumerate([('observed', 'Observed'), ('level', 'Level'), ('trend', 'Trend'), ('season', 'Season')]):
        axes[i].cla()
        axes[i].plot(frame.index, frame[column], color=stl.wheel[i], linewidth=stl.lw, label=label)
        axes[i].legend(loc='upper left')
        axes[i].set_ylabel(label)
    axes[-1].set_xlabel('Sample')

    return axes
