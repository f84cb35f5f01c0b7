"""
Package manifest access for cratos.

Reads package.json at a module root and validates the fields cratos
reports. Other fields are ignored.
"""

import json
import os
from dataclasses import dataclass
import logging

from ..domain import MANIFEST_FILE
from ..exit_codes import ManifestError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManifest:
    name: str
    version: str


class ManifestReader:
    """
    Reads package manifests from module directories.

    Example:
        reader = ManifestReader()
        manifest = reader.read("/path/to/module")
        print(manifest.name, manifest.version)
    """

    def __init__(self, filename: str = MANIFEST_FILE):
        self.filename = filename

    def read(self, path: str) -> PackageManifest:
        """
        Read and validate the manifest of the module at path.

        Raises:
            ManifestError: If the file is missing, unreadable, not a JSON
                object, or lacks string name/version fields
        """
        manifest_path = os.path.join(path, self.filename)
        try:
            with open(manifest_path, encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ManifestError(f"Cannot read {manifest_path}: {e.strerror or e}", path=path)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestError(f"Invalid JSON in {manifest_path}: {e}", path=path)

        if not isinstance(data, dict):
            raise ManifestError(f"{manifest_path} must contain a JSON object", path=path)

        for key in ('name', 'version'):
            if not isinstance(data.get(key), str):
                raise ManifestError(f"{manifest_path} has no string '{key}' field", path=path)

        logger.debug(f"Read manifest {data['name']}@{data['version']} from {manifest_path}")
        return PackageManifest(name=data['name'], version=data['version'])
