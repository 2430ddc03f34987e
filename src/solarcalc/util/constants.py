# Time
J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0
HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 1440
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
MILLISECONDS_PER_HOUR = 3600000

# Angles
DEGREES_PER_HOUR = 15.0
MINUTES_PER_DEGREE = 4.0
ARCSECONDS_PER_DEGREE = 3600.0

# Sun
SOLAR_CONSTANT = 1367.0  # W/m^2
SUNRISE_ZENITH = 90.833  # solar radius plus standard refraction at the horizon
