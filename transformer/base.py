"""Abstract base class for event record transformers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

from reader.models import EventRecord


class BaseTransformer(ABC):
    """Abstract base class defining the interface for event transformers.

    Extend this class to write event records in other calendar formats.
    Each transform() call replaces the previous one; save() writes the
    most recent result to a single file.
    """

    extension: str = ""

    @abstractmethod
    def transform(self, record: EventRecord) -> Any:
        """Transform an event record into the target format.

        Args:
            record: The assembled event.

        Returns:
            Transformed data in the target format.
        """
        pass

    @abstractmethod
    def save(self, output_path: Union[str, Path]) -> None:
        """Save the transformed data to a file.

        Args:
            output_path: Path to the output file.
        """
        pass
