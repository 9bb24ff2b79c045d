"""External sentiment annotation."""

from .invoker import SentimentInvoker, score_sentences

__all__ = ["SentimentInvoker", "score_sentences"]
