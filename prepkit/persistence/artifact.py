"""Transformer artifact serialization and deserialization."""

from __future__ import annotations

import logging
import pickle
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from ..errors import ArtifactNotFoundError, InvalidDataError

logger = logging.getLogger(__name__)

# Current artifact version
ARTIFACT_VERSION = "1.0"


@dataclass
class TransformerArtifact:
    """Fitted transformer plus the metadata needed to reload it.

    The transformer keeps its full fitted state (vocabularies, scale
    parameters, fill values), so a loaded artifact transforms new data
    exactly like the original instance.
    """

    version: str
    transformer: Any
    transformer_class: str
    saved_at: str


def create_artifact(transformer: Any) -> TransformerArtifact:
    """Wrap a fitted transformer in a new artifact."""
    return TransformerArtifact(
        version=ARTIFACT_VERSION,
        transformer=transformer,
        transformer_class=type(transformer).__name__,
        saved_at=datetime.now().isoformat(),
    )


def save_transformer(transformer: Any, path: str | Path) -> None:
    """Save a fitted transformer to disk.

    Args:
        transformer: The transformer or estimator to save.
        path: Path to save the artifact (typically .pkl extension).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "wb") as f:
        pickle.dump(create_artifact(transformer), f, protocol=pickle.HIGHEST_PROTOCOL)
    logger.info(f"Saved {type(transformer).__name__} to {path}")


def load_artifact(path: str | Path) -> TransformerArtifact:
    """Load a transformer artifact from disk.

    Raises:
        ArtifactNotFoundError: If the file does not exist.
        InvalidDataError: If the file does not hold a TransformerArtifact.
    """
    path = Path(path)

    if not path.exists():
        raise ArtifactNotFoundError(str(path))

    with open(path, "rb") as f:
        artifact = pickle.load(f)

    if not isinstance(artifact, TransformerArtifact):
        raise InvalidDataError(f"{path} does not contain a transformer artifact")
    if artifact.version != ARTIFACT_VERSION:
        logger.warning(
            f"Artifact {path} has version {artifact.version}, expected {ARTIFACT_VERSION}"
        )
    return artifact


def load_transformer(path: str | Path) -> Any:
    """Load a fitted transformer saved with save_transformer()."""
    return load_artifact(path).transformer
