"""On-disk dictionary artifacts."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from bayesdict.dictionary import TokenDictionary
from bayesdict.errors import CorruptStateError
from bayesdict.utils.hashing import sha256_bytes, sha256_file
from bayesdict.utils.logging import get_logger
from bayesdict.utils.serialization import read_json, write_json

logger = get_logger(__name__)

DICTIONARY_FILE = "dictionary.json"
MANIFEST_FILE = "manifest.json"


def save_dictionary(
    output_dir: Path,
    dictionary: TokenDictionary,
    metadata: dict[str, object] | None = None,
) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    blob_path = output_dir / DICTIONARY_FILE
    manifest_path = output_dir / MANIFEST_FILE

    blob = dictionary.serialize()
    blob_tmp = blob_path.with_name(blob_path.name + ".tmp")
    manifest_tmp = manifest_path.with_name(manifest_path.name + ".tmp")
    blob_tmp.write_bytes(blob)

    manifest = {
        "format_version": 1,
        "created_at": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "entry_count": len(dictionary),
        "document_count": dictionary.document_count,
        "token_count": dictionary.token_count,
        "usable_token_count": dictionary.usable_token_count,
        "metadata": metadata or {},
        "files": {DICTIONARY_FILE: sha256_bytes(blob)},
    }
    try:
        write_json(manifest_tmp, manifest)
    except OSError:
        blob_tmp.unlink(missing_ok=True)
        raise
    # Both files are complete on disk before either replaces the previous artifact.
    blob_tmp.replace(blob_path)
    manifest_tmp.replace(manifest_path)
    logger.info(
        "Saved dictionary to %s (%d entries, %d documents)",
        output_dir,
        len(dictionary),
        dictionary.document_count,
    )
    return output_dir


def load_dictionary(artifact_dir: Path) -> tuple[TokenDictionary, dict[str, object]]:
    """Load a dictionary artifact, verifying the manifest checksum when present."""
    blob_path = artifact_dir / DICTIONARY_FILE
    manifest_path = artifact_dir / MANIFEST_FILE
    if not blob_path.exists():
        raise FileNotFoundError(f"Dictionary not found: {blob_path}")

    manifest: dict[str, object] = {}
    if manifest_path.exists():
        try:
            manifest = read_json(manifest_path)
        except ValueError as exc:
            raise CorruptStateError(f"Unreadable manifest {manifest_path}: {exc}") from exc
        files = manifest.get("files")
        expected = files.get(DICTIONARY_FILE) if isinstance(files, dict) else None
        if expected is not None and expected != sha256_file(blob_path):
            raise CorruptStateError(f"Checksum mismatch for {blob_path}")

    dictionary = TokenDictionary.deserialize(blob_path.read_bytes())
    logger.info("Loaded dictionary from %s (%d entries)", artifact_dir, len(dictionary))
    return dictionary, manifest
