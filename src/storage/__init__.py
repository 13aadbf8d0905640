from .best_score import BestScoreStore, JsonBestScoreStore, MemoryBestScoreStore

__all__ = [
    "BestScoreStore",
    "JsonBestScoreStore",
    "MemoryBestScoreStore",
]
