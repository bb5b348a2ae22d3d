"""
Konfiguration och konstanter för resemotorn
"""

# Geometri
EARTH_RADIUS_KM = 6371.0
DEFAULT_STEP_KM = 10.0  # Avstånd mellan interpolerade punkter i polylinjen

# Ruttval
DEFAULT_ROUTE_COUNT = 4
MIN_DESTINATION_DISTANCE_KM = 5.0  # Närmare än så räknas som startstaden själv

# Aktiviteter
RUN_ACTIVITY_TYPE = "Run"

# Export
GPX_CREATOR = "Löparresa"
