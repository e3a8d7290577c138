"""Saving and loading fitted transformers."""

from .artifact import (
    ARTIFACT_VERSION,
    TransformerArtifact,
    load_artifact,
    load_transformer,
    save_transformer,
)

__all__ = [
    "ARTIFACT_VERSION",
    "TransformerArtifact",
    "load_artifact",
    "load_transformer",
    "save_transformer",
]
