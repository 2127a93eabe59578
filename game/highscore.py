import json
import logging
import os

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Single best score kept in a small JSON file."""

    def __init__(self, path):
        self.path = path

    def load(self):
        """Load the high score from disk, return 0 if not found or on error."""
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
            value = int(data.get('highscore', 0))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        if value < 0:
            logger.warning("Ignoring negative high score %d in %s", value, self.path)
            return 0
        return value

    def save(self, score):
        """Save the high score to disk (best-effort)."""
        try:
            with open(self.path, 'w') as f:
                json.dump({'highscore': int(score)}, f)
        except OSError as e:
            logger.error("Could not save high score to %s: %s", self.path, e)
            return False
        return True
