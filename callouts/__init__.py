from .markdown.callout_meta import CalloutMeta, build_callout_meta
from .markdown.config import CalloutConfig
from .markdown.preprocessors.callout_transformer import transform

__all__ = ("CalloutConfig", "CalloutMeta", "build_callout_meta", "transform")
