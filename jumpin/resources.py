"""Caching loader for textures, sounds and models, and a playable sound."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Protocol

DEFAULT_TEXTURE_DIRECTORY = "Resources/Dds/"
DEFAULT_SOUND_DIRECTORY = "Resources/Sounds/"
DEFAULT_MODELS_DIRECTORY = "Resources/Models/"

Loader = Callable[[Path], Any]


class Channel(Protocol):
    def set_volume(self, volume: float) -> None: ...

    def stop(self) -> None: ...


class SoundEffect(Protocol):
    def play(self, loops: int = 0) -> Channel | None: ...


def _load_image(path: Path) -> Any:
    import pygame

    return pygame.image.load(str(path))


def _load_sound(path: Path) -> Any:
    import pygame

    return pygame.mixer.Sound(str(path))


def _locate_model(path: Path) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"model not found: {path}")
    return path


class ResourceManager:
    """Loads each named resource once and hands out the cached object."""

    def __init__(
        self,
        base_dir: str | Path = ".",
        texture_loader: Loader = _load_image,
        sound_loader: Loader = _load_sound,
        model_loader: Loader = _locate_model,
    ) -> None:
        self._base_dir = Path(base_dir)
        self._texture_loader = texture_loader
        self._sound_loader = sound_loader
        self._model_loader = model_loader
        self._textures: dict[str, Any] = {}
        self._sounds: dict[str, Any] = {}
        self._models: dict[str, Any] = {}

    def _path(self, directory: str, filename: str) -> Path:
        return self._base_dir / (directory + filename)

    def load_texture(self, filename: str) -> None:
        """Load a texture; a file that cannot be read is registered as None."""
        if filename in self._textures:
            return
        try:
            texture = self._texture_loader(self._path(DEFAULT_TEXTURE_DIRECTORY, filename))
        except OSError:
            texture = None
        self._textures[filename] = texture

    def request_texture(self, filename: str) -> Any:
        """Loaded texture, or None when it was never loaded."""
        return self._textures.get(filename)

    def request_sound(self, filename: str) -> Any:
        """Sound effect for ``filename``, loaded on first request."""
        if filename not in self._sounds:
            self._sounds[filename] = self._sound_loader(
                self._path(DEFAULT_SOUND_DIRECTORY, filename)
            )
        return self._sounds[filename]

    def load_model(self, filename: str) -> None:
        """Load a model unless it is already loaded."""
        if filename not in self._models:
            self._models[filename] = self._model_loader(
                self._path(DEFAULT_MODELS_DIRECTORY, filename)
            )

    def request_model(self, filename: str) -> Any:
        """Loaded model, or None when it was never loaded."""
        return self._models.get(filename)

    def clear(self) -> None:
        """Drop every cached resource."""
        self._textures.clear()
        self._sounds.clear()
        self._models.clear()


class Sound:
    """One playback slot of a sound effect; replaying restarts it."""

    def __init__(self, effect: SoundEffect) -> None:
        self._effect = effect
        self._channel: Channel | None = None
        self._volume = 1.0

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def channel(self) -> Channel | None:
        """Channel of the current playback, if any."""
        return self._channel

    def play(self, loop: bool = False) -> None:
        """Stop any earlier playback and start again at the set volume."""
        self.stop()
        channel = self._effect.play(loops=-1 if loop else 0)
        if channel is not None:
            channel.set_volume(self._volume)
        self._channel = channel

    def stop(self) -> None:
        """Stop the current playback."""
        if self._channel is not None:
            self._channel.stop()
        self._channel = None

    def set_volume(self, volume: float = 1.0) -> None:
        """Set the volume for later playback, clamped to [0, 1]."""
        self._volume = min(max(volume, 0.0), 1.0)