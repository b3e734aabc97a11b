# Configuración del servicio de tarifas RideFare
import os

from dotenv import load_dotenv

load_dotenv()

# Servidor
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Google Directions API
DIRECTIONS_API_URL = os.getenv(
    "DIRECTIONS_API_URL", "https://maps.googleapis.com/maps/api/directions/json"
)
DIRECTIONS_TRAVEL_MODE = "driving"
DIRECTIONS_TIMEOUT_SECONDS = float(os.getenv("DIRECTIONS_TIMEOUT_SECONDS", "10"))

# Read per request, so a missing key only fails the request that needs it
DIRECTIONS_API_KEY_ENV = "GOOGLE_DIRECTIONS_API_KEY"

# Tarifas
CURRENCY = "INR"
PROVIDER_CATEGORIES = ("Economy", "Premium", "Auto", "Bike")

# Optional JSON file replacing the built-in table below
PROVIDERS_FILE = os.getenv("FARE_PROVIDERS_FILE")

PROVIDER_TABLE_VERSION = "2024.1"

# Simplified public rate cards (INR)
PROVIDERS = [
    # Ola
    {"name": "Ola Mini", "category": "Economy", "baseFare": 40, "perKmRate": 12, "perMinRate": 2},
    {"name": "Ola Prime Sedan", "category": "Premium", "baseFare": 60, "perKmRate": 15, "perMinRate": 2.5},
    {"name": "Ola Auto", "category": "Auto", "baseFare": 25, "perKmRate": 10, "perMinRate": 1.5},
    # Uber
    {"name": "Uber Go", "category": "Economy", "baseFare": 45, "perKmRate": 13, "perMinRate": 2},
    {"name": "Uber Premier", "category": "Premium", "baseFare": 70, "perKmRate": 18, "perMinRate": 3},
    # Rapido
    {"name": "Rapido Bike", "category": "Bike", "baseFare": 15, "perKmRate": 8, "perMinRate": 1},
    {"name": "Rapido Auto", "category": "Auto", "baseFare": 20, "perKmRate": 9, "perMinRate": 1.2},
]

# Deep links, matched against the provider name prefix in this order
DEEP_LINK_TEMPLATES = {
    "Ola": (
        "olacabs://app/launch?lat={origin_lat}&lng={origin_lng}"
        "&drop_lat={dest_lat}&drop_lng={dest_lng}"
    ),
    "Uber": (
        "uber://?action=setPickup"
        "&pickup[latitude]={origin_lat}&pickup[longitude]={origin_lng}"
        "&dropoff[latitude]={dest_lat}&dropoff[longitude]={dest_lng}"
    ),
    # HTTPS link, opens the web flow when the app is not installed
    "Rapido": (
        "https://rapido.bike/ride/share?pickup_lat={origin_lat}&pickup_lng={origin_lng}"
        "&drop_lat={dest_lat}&drop_lng={dest_lng}"
    ),
}
