"""MoonBit documentation skill builder package."""

from moonbit_docs.processor import DocsProcessor, FetchError, ProcessorConfig, ProcessorStats

__all__ = ["DocsProcessor", "FetchError", "ProcessorConfig", "ProcessorStats"]
