"""The sokobo domain: every aggregate and value object registers against it."""

from protean.domain import Domain

from sokobo.config import get_settings
from sokobo.utils.logging import configure_logging

configure_logging(log_dir=get_settings().log_dir)

sokobo = Domain(name="sokobo")
