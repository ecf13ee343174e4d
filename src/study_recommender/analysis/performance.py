"""Short-term quiz performance trend and consistency."""

from collections.abc import Sequence

import numpy as np

from study_recommender.models.history import QuizResult
from study_recommender.models.recommendation import PerformanceSignal

RECENT_WINDOW = 5
MIN_RESULTS = 2
VARIANCE_SCALE = 1000.0


class PerformanceAnalyzer:
    """Derives trend and consistency from the most recent quiz scores."""

    def __init__(self, window: int = RECENT_WINDOW):
        self.window = window

    def analyze(self, quiz_results: Sequence[QuizResult]) -> PerformanceSignal:
        """Analyze recent performance.

        Args:
            quiz_results: Quiz history in completion order.

        Returns:
            Mean score change per quiz (as a fraction of 100) and a 0-1
            stability measure. Fewer than two results give the neutral
            signal (trend 0, consistency 0.5).
        """
        if len(quiz_results) < MIN_RESULTS:
            return PerformanceSignal()

        scores = np.array([q.score for q in quiz_results[-self.window:]], dtype=float)
        trend = float(np.mean(np.diff(scores)) / 100)
        # Population variance (ddof=0)
        consistency = max(0.0, 1 - float(np.var(scores)) / VARIANCE_SCALE)
        return PerformanceSignal(trend=trend, consistency=consistency)
