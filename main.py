# ------------------------------------------------------------------------------
# Main Script for the UnitWatch service dashboard
# main.py
# ------------------------------------------------------------------------------
from config import get_config
config = get_config()
from logging_config import get_logger
logger = get_logger(__name__)

from core import introspection_core
from config import get_introspection_settings

# --------------------------------------------------------------------------
# Configuration Parameters
# --------------------------------------------------------------------------
_debug = config["DEBUG_MODE"]
logger.info(f"Debug mode is {'enabled' if _debug else 'disabled'}.")

introspection_core.configure(get_introspection_settings(config))

# -----------------------------
# Import and Run the Web Interface
# -----------------------------
from web.web_interface import create_web_interface

# Expose the Flask server as the WSGI app.
interface = create_web_interface(config)
app = interface["server"]

if __name__ == '__main__':
    interface["run"](debug=_debug, host=config["HOST"], port=config["PORT"])
