"""Image manifest and catalog reference helpers."""

import json
from collections.abc import Iterable
from typing import Any

from ..ports import LoggerPort
from .errors import ManifestParseError
from .models import History, ImageReference, LayerReference, ManifestConfig, ManifestSchema


def parse_json_manifest(data: str) -> ManifestSchema:
    """Parse an operator index manifest (schema 1, ``fsLayers``)."""
    try:
        root = json.loads(data)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid manifest JSON: {e}") from e

    if not isinstance(root, dict):
        raise ManifestParseError("Manifest must be a JSON object")
    if not isinstance(root.get("fsLayers"), list):
        raise ManifestParseError("Manifest is missing fsLayers")

    if not all(isinstance(layer, dict) for layer in root["fsLayers"]):
        raise ManifestParseError("Manifest fsLayers entries must be JSON objects")
    raw_config = root.get("config")
    if raw_config is not None and not isinstance(raw_config, dict):
        raise ManifestParseError("Manifest config must be a JSON object")

    try:
        layers = tuple(LayerReference.from_dict(layer) for layer in root["fsLayers"])
        config = ManifestConfig.from_dict(raw_config) if raw_config else None
        history = _parse_history(root.get("history"))
        schema_version = root.get("schemaVersion")
        return ManifestSchema(
            fs_layers=layers,
            tag=root.get("tag"),
            name=root.get("name"),
            architecture=root.get("architecture"),
            schema_version=int(schema_version) if schema_version is not None else None,
            config=config,
            history=history,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ManifestParseError(f"Invalid manifest field: {e}") from e


def _parse_history(raw: Any) -> tuple[History, ...] | None:
    if raw is None:
        return None
    return tuple(History(v1_compatibility=item["v1Compatibility"]) for item in raw)


def parse_image_index(catalogs: Iterable[str], logger: LoggerPort) -> list[ImageReference]:
    """Parse ``registry/namespace/name:version`` catalog strings.

    The result lists the catalogs in reverse order.
    """
    refs: list[ImageReference] = []
    for catalog in catalogs:
        logger.trace(f"catalogs {catalog}")
        parts = catalog.split("/")
        if len(parts) < 3:
            raise ManifestParseError(f"Catalog reference needs registry/namespace/name: {catalog}")
        name, sep, version = parts[2].partition(":")
        if not sep or not name or not version:
            raise ManifestParseError(f"Catalog reference needs a version tag: {catalog}")
        ref = ImageReference(registry=parts[0], namespace=parts[1], name=name, version=version)
        logger.debug(f"image reference {ref}")
        refs.insert(0, ref)
    return refs


def _working_dir(dir: str, name: str, version: str, arch: str | None) -> str:
    path = f"{dir}{name}/{version}/"
    if arch is not None:
        path += f"{arch}/"
    return path


def get_cache_dir(dir: str, name: str, version: str, arch: str | None = None) -> str:
    """Get the cache directory for an image: ``<dir><name>/<version>/[<arch>/]cache``."""
    return _working_dir(dir, name, version, arch) + "cache"


def get_manifest_json_file(dir: str, name: str, version: str, arch: str | None = None) -> str:
    """Get the manifest file path: ``<dir><name>/<version>/[<arch>/]manifest.json``."""
    return _working_dir(dir, name, version, arch) + "manifest.json"


def get_image_manifest_url(image_ref: ImageReference) -> str:
    """Build the registry v2 manifest URL for an image reference."""
    return (
        f"https://{image_ref.registry}/v2/{image_ref.namespace}/{image_ref.name}"
        f"/manifests/{image_ref.version}"
    )
