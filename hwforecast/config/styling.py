
# forecast plot palette

# observed data
OB = [
    '#15394C',
    '#3C6F8A',
    '#679FBA',
]

# model output
MO = [
    '#FF5331',
    '#FD7E54',
    '#FBAA7F',
]

# color wheel for stacked component axes
wheel = [
    OB[1],
    MO[1],
    OB[0],
    MO[0],
]

# default linewidth
lw = 2
