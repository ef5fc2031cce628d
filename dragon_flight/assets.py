"""Sprite loading. Runs once at startup, before the game loop is allowed to start."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .config import ASSET_DIR, ASSET_MANIFEST

logger = logging.getLogger(__name__)


class AssetLoadError(Exception):
    """A required image could not be loaded."""

    def __init__(self, name: str, path: Path, reason: str) -> None:
        super().__init__(f"failed to load asset {name!r} from {path}: {reason}")
        self.name = name
        self.path = path
        self.reason = reason


@dataclass
class AssetLoadResult:
    surfaces: dict[str, pygame.Surface] = field(default_factory=dict)
    failures: list[AssetLoadError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_names(self) -> list[str]:
        return [f.name for f in self.failures]


class AssetLoader:
    """Loads every sprite in a manifest of ``name -> file name``.

    Surfaces are returned unconverted; the renderer converts them once a
    display mode exists.
    """

    def __init__(self, directory: Path | str = ASSET_DIR, manifest: dict[str, str] | None = None) -> None:
        self.directory = Path(directory)
        self.manifest = dict(ASSET_MANIFEST if manifest is None else manifest)

    def _load_one(self, name: str, path: Path) -> pygame.Surface:
        if not path.is_file():
            raise AssetLoadError(name, path, "file not found")
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise AssetLoadError(name, path, str(exc)) from exc

    async def load_all(self) -> AssetLoadResult:
        names = list(self.manifest)
        paths = [self.directory / self.manifest[n] for n in names]
        results = await asyncio.gather(
            *(asyncio.to_thread(self._load_one, n, p) for n, p in zip(names, paths)),
            return_exceptions=True,
        )

        outcome = AssetLoadResult()
        for name, result in zip(names, results):
            if isinstance(result, AssetLoadError):
                logger.error("%s", result)
                outcome.failures.append(result)
            elif isinstance(result, BaseException):
                raise result
            else:
                logger.debug("loaded asset %r (%dx%d)", name, *result.get_size())
                outcome.surfaces[name] = result
        return outcome


def load_assets_or_fail(loader: AssetLoader) -> dict[str, pygame.Surface]:
    """Startup gate: block until every asset is loaded or raise the first failure."""
    result = asyncio.run(loader.load_all())
    if not result.ok:
        logger.critical("cannot start, missing assets: %s", ", ".join(result.failed_names))
        raise result.failures[0]
    logger.info("loaded %d assets from %s", len(result.surfaces), loader.directory)
    return result.surfaces
