"""Resource services attached to :class:`mistral_client.MistralClient`."""

from .agents import AgentsService
from .base import BaseService, StreamingService
from .batch import BatchService
from .chat import ChatService
from .classifiers import ClassifiersService
from .embeddings import EmbeddingsService, cosine_similarity
from .files import FilesService
from .fim import FIMService
from .fine_tuning import FineTuningService
from .models import ModelsService
from .moderations import ModerationsService
from .ocr import OCRService

__all__ = [
    "AgentsService",
    "BaseService",
    "StreamingService",
    "BatchService",
    "ChatService",
    "ClassifiersService",
    "EmbeddingsService",
    "cosine_similarity",
    "FilesService",
    "FIMService",
    "FineTuningService",
    "ModelsService",
    "ModerationsService",
    "OCRService",
]
