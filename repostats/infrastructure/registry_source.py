"""Read package repository URLs from a local Julia registry.

A registry is either unpacked (``<registry>/Registry.toml``) or packed, in
which case a sibling ``<registry>.toml`` names a ``.tar.gz`` holding the
same tree.
"""

import logging
import os
import tarfile
from typing import Dict, Optional

import toml

logger = logging.getLogger(__name__)


class RegistryNotFoundError(Exception):
    """Raised when neither an unpacked nor a packed registry is found."""
    pass


class DirectoryRegistryReader:
    """Reads registry files from an unpacked checkout."""

    def __init__(self, registry_path: str):
        self.registry_path = registry_path

    def __str__(self) -> str:
        return self.registry_path

    def read(self, relative_path: str) -> str:
        path = os.path.join(self.registry_path, *relative_path.split("/"))
        with open(path, encoding="utf-8") as f:
            return f.read()


class TarballRegistryReader:
    """Reads registry files from a packed registry, held in memory."""

    def __init__(self, tarball_path: str):
        self.tarball_path = tarball_path
        self.files: Dict[str, str] = {}

        with tarfile.open(tarball_path, "r:gz") as tar:
            for member in tar:
                if not member.isfile():
                    continue
                name = member.name.removeprefix("./")
                # Only the files load_registry reads
                if name == "Registry.toml" or name.endswith("/Package.toml"):
                    self.files[name] = tar.extractfile(member).read().decode("utf-8")

        logger.debug(f"Read {len(self.files)} files from {tarball_path}")

    def __str__(self) -> str:
        return self.tarball_path

    def read(self, relative_path: str) -> str:
        try:
            return self.files[relative_path]
        except KeyError:
            raise FileNotFoundError(f"{relative_path} not in {self.tarball_path}")


def find_packed_registry(registry_path: str) -> Optional[str]:
    """
    Locate the tarball of a packed registry.

    Args:
        registry_path: Registry location, e.g. ~/.julia/registries/General

    Returns:
        Path of the .tar.gz named by the sibling <name>.toml, or None
    """
    info_file = registry_path.rstrip("/" + os.sep) + ".toml"
    if not os.path.isfile(info_file):
        return None

    with open(info_file, encoding="utf-8") as f:
        info = toml.load(f)

    tarball = info.get("path", "")
    if not tarball.endswith(".tar.gz"):
        return None
    return os.path.join(os.path.dirname(info_file), tarball)


def open_registry(registry_path: str):
    """
    Get a reader for an unpacked or packed registry.

    Raises:
        RegistryNotFoundError: If no registry exists at registry_path
    """
    if os.path.isfile(os.path.join(registry_path, "Registry.toml")):
        return DirectoryRegistryReader(registry_path)

    tarball = find_packed_registry(registry_path)
    if tarball is None or not os.path.isfile(tarball):
        raise RegistryNotFoundError(f"No Registry.toml or packed registry found for {registry_path}")

    reader = TarballRegistryReader(tarball)
    if "Registry.toml" not in reader.files:
        raise RegistryNotFoundError(f"No Registry.toml in {tarball}")
    return reader


def load_registry(registry_path: str) -> Dict[str, str]:
    """
    Map every package in a registry to its declared repository URL.

    Registry.toml lists packages as ``uuid = {name, path}``; each
    ``<path>/Package.toml`` declares ``repo``. Packages are returned in
    Registry.toml order. When two UUIDs share a name, the first one wins.

    Args:
        registry_path: Registry location (unpacked directory, or the path
            a packed registry would unpack to)

    Returns:
        Dict of package name -> repository URL

    Raises:
        RegistryNotFoundError: If no registry exists at registry_path
    """
    reader = open_registry(registry_path)
    registry = toml.loads(reader.read("Registry.toml"))

    packages = registry.get("packages", {})
    logger.info(f"Loading {len(packages)} packages from {reader}")

    repo_urls: Dict[str, str] = {}
    for uuid, entry in packages.items():
        name = entry.get("name")
        package_file = entry.get("path", "").rstrip("/") + "/Package.toml"

        try:
            package = toml.loads(reader.read(package_file))
        except (OSError, toml.TomlDecodeError) as e:
            logger.warning(f"Skipping package {name} ({uuid}): {e}")
            continue

        repo = package.get("repo")
        if not repo:
            logger.warning(f"Skipping package {name} ({uuid}): no repo declared")
            continue

        if name in repo_urls:
            logger.warning(
                f"Skipping package {name} ({uuid}): name already registered "
                f"with {repo_urls[name]}"
            )
            continue

        repo_urls[name] = repo

    return repo_urls
