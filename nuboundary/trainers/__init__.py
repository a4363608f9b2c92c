"""Training support: event streams and the GIS trainer."""

from nuboundary.trainers.events import Event, SentenceEventStream, TokenEventStream
from nuboundary.trainers.gis import GISTrainer, train_model

__all__ = ["Event", "SentenceEventStream", "TokenEventStream", "GISTrainer", "train_model"]
