
# Holt-Winters
alpha  = 0.5        # level smoothing factor
beta   = 0.4        # season smoothing factor
gamma  = 0.6        # trend smoothing factor

# initialisation
n_seed_samples = 2  # number of leading samples that seed the level and are never forecast

# pandas
forecast_name  = 'forecast'     # name of returned forecast series
