"""Constants for the mein-senec.de library."""

BASE_URL = "https://app-gateway-prod.senecops.com/v1/senec"

# API endpoints
ENDPOINT_LOGIN = "/login"
ENDPOINT_DEVICES = "/anlagen"
ENDPOINT_DASHBOARD = "/anlagen/{device_id}/dashboard"

HEADER_AUTHORIZATION = "Authorization"

# Map dashboard payload keys to MetricGroup attributes
METRIC_MAP = {
    "stromerzeugung": "generation",
    "stromverbrauch": "consumption",
    "netzeinspeisung": "grid_feed_in",
    "netzbezug": "grid_draw",
    "speicherbeladung": "battery_charge",
    "speicherentnahme": "battery_discharge",
    "speicherfuellstand": "battery_level",
    "autarkie": "self_sufficiency",
    "wallbox": "wallbox",
}

# Map device list keys to Device attributes
DEVICE_MAP = {
    "id": "id",
    "steuereinheitnummer": "control_unit_number",
    "gehaeusenummer": "housing_number",
    "strasse": "street",
    "hausnummer": "house_number",
    "postleitzahl": "postal_code",
    "ort": "city",
    "zeitzone": "timezone",
    "systemType": "system_type",
}
