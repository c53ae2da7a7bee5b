"""Request/response models for every API resource."""

from .agents import AgentAction, AgentFunction, AgentRequest, AgentResponse, AgentTool
from .batch import BatchOptions, BatchRequest, BatchResponse, BatchResult, BatchSummary, RetryPolicy
from .chat import ChatCompletionChoice, ChatCompletionRequest, ChatCompletionResponse
from .classifiers import ClassifierRequest, ClassifierResponse, ClassifierResult
from .common import DeltaMessage, Function, Message, Tool, UsageInfo
from .embeddings import (
    EmbeddingData,
    EmbeddingMetadata,
    EmbeddingRequest,
    EmbeddingResponse,
    EnhancedEmbeddingRequest,
    EnhancedEmbeddingResponse,
)
from .files import File, FileList
from .fim import FIMChoice, FIMRequest, FIMResponse
from .fine_tuning import FineTuningJob, FineTuningJobList, FineTuningJobRequest
from .model_info import EnhancedModel, Model, ModelCapability, ModelList, ModelPerformance, TokenCosts
from .moderations import ChatModerationRequest, ModerationRequest, ModerationResponse, ModerationResult
from .ocr import BoundingBox, OCRAsyncJob, OCRBlock, OCRRequest, OCRResponse, OCRResult

__all__ = [
    "AgentAction",
    "AgentFunction",
    "AgentRequest",
    "AgentResponse",
    "AgentTool",
    "BatchOptions",
    "BatchRequest",
    "BatchResponse",
    "BatchResult",
    "BatchSummary",
    "RetryPolicy",
    "ChatCompletionChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ClassifierRequest",
    "ClassifierResponse",
    "ClassifierResult",
    "DeltaMessage",
    "Function",
    "Message",
    "Tool",
    "UsageInfo",
    "EmbeddingData",
    "EmbeddingMetadata",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EnhancedEmbeddingRequest",
    "EnhancedEmbeddingResponse",
    "File",
    "FileList",
    "FIMChoice",
    "FIMRequest",
    "FIMResponse",
    "FineTuningJob",
    "FineTuningJobList",
    "FineTuningJobRequest",
    "EnhancedModel",
    "Model",
    "ModelCapability",
    "ModelList",
    "ModelPerformance",
    "TokenCosts",
    "ChatModerationRequest",
    "ModerationRequest",
    "ModerationResponse",
    "ModerationResult",
    "BoundingBox",
    "OCRAsyncJob",
    "OCRBlock",
    "OCRRequest",
    "OCRResponse",
    "OCRResult",
]
