"""Abstract base class for generative text providers."""
from abc import ABC, abstractmethod


class TextGenerationProviderABC(ABC):
    """Base interface for AI text-generation providers."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send one prompt and return the first candidate's text, trimmed.

        Returns "" when the candidate carries no text. Raises UpstreamError when
        the request fails or no candidate comes back.
        """

    async def close(self) -> None:
        """Clean up resources. Override in subclasses if cleanup is needed."""
