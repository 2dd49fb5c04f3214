# Vulture whitelist - parameters required by callback signatures
# that vulture incorrectly reports as unused.
#
# Run vulture with: vulture airgradient_exporter/ vulture_whitelist.py --min-confidence 80

# Signal handler signature (signum, frame)
frame  # unused variable

# Flask error handler signature
error  # unused variable
