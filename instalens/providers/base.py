"""Abstract provider interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ScrapeJob:
    """Handle for a finished scraping job."""

    actor_id: str
    run_id: str
    dataset_id: str
    status: str = "SUCCEEDED"


class ScrapingProvider(ABC):
    """Abstract base class for scraping job backends."""

    @abstractmethod
    async def submit_job(self, actor_id: str, run_input: dict) -> ScrapeJob:
        """
        Start a scraping job and wait for it to finish.

        Args:
            actor_id: Provider task/actor identifier
            run_input: Actor input parameters

        Returns:
            ScrapeJob handle pointing at the job's result set
        """
        ...

    @abstractmethod
    async def list_results(self, job: ScrapeJob) -> list[dict]:
        """
        Read the result set of a finished job.

        Args:
            job: Handle returned by submit_job

        Returns:
            Raw provider records
        """
        ...

    async def close(self) -> None:
        """Cleanup connections and resources."""

    async def __aenter__(self) -> "ScrapingProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class TextGenerator(ABC):
    """Abstract base class for generative-text backends."""

    @abstractmethod
    async def generate(self, prompt: str, system_instruction: str) -> str:
        """
        Generate text for a single prompt.

        Args:
            prompt: User prompt
            system_instruction: System framing for the model

        Returns:
            Generated text, possibly empty
        """
        ...
