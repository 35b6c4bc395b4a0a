"""AI search visibility ROI projector.

Turns visibility into visitors using the business's real data, then into
orders using its conversion rate, then into revenue using its AOV.
"""

from loguru import logger

__version__ = "1.0.0"

# Silent until an application calls
# ``aivis_roi.log.configure_logging``.
logger.disable("aivis_roi")
