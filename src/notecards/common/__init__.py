from .ids import MS_PER_DAY, days_to_ms, generate_card_id, now_ms
from .logging_config import ContextFormatter, setup_logging
