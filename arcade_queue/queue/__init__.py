"""Player queue package."""
from .models import QueueKey, QueueSnapshot
from .player_queue import PlayerQueue

__all__ = ["PlayerQueue", "QueueKey", "QueueSnapshot"]
