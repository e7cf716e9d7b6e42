"""Application configuration"""
import os

# Reading window
WINDOW_SIZE = 20

# Simulation settings
TICK_INTERVAL_SECONDS = float(os.getenv("TICK_INTERVAL_SECONDS", "2.0"))
READING_MIN = 65.0
READING_MAX = 85.0
TIMESTAMP_FORMAT = "%H:%M:%S"

# Dashboard rendering
CHART_MIN_SPAN = 1.0
CHART_WIDTH = 300
CHART_HEIGHT = 150
PLACEHOLDER = "--"
TEMPERATURE_UNIT = "°F"

# Server settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
