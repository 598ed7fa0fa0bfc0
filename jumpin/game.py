"""The game: owns the timer, the resources and the scenes, and runs the loop."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Any, Callable, Protocol, Sequence

from jumpin.debug_camera import DebugCamera
from jumpin.debug_draw import draw_box
from jumpin.game_scene import GameScene
from jumpin.geometry import Matrix, Vector3
from jumpin.menu_scenes import ResultScene, StageSelectScene, TitleScene
from jumpin.resources import ResourceManager
from jumpin.scene_manager import KeyboardState, SceneManager
from jumpin.steptimer import StepTimer

APP_NAME = "JumpinJumpin"
DEFAULT_SIZE = (1280, 720)
FIELD_OF_VIEW = math.radians(45.0)
NEAR_PLANE = 0.1
FAR_PLANE = 100.0

MODELS = ("JumpinPlayer.sdkmesh", "block.sdkmesh", "flag.sdkmesh")
TEXTURES = (
    "pressspace.dds",
    "title.dds",
    "clear.dds",
    "gameover.dds",
    "titleback.dds",
    "arrow.dds",
    "stage1.dds",
    "stage2.dds",
    "clearback.dds",
    "gameoverback.dds",
    "guide.dds",
)


class Renderer(Protocol):
    def clear(self) -> None: ...

    def draw_sprite(self, texture: Any, position: tuple[float, float]) -> None: ...

    def draw_model(self, model: Any, world: Matrix, view: Matrix) -> None: ...

    def draw_text(self, text: str, position: tuple[float, float]) -> None: ...

    def present(self) -> None: ...


class Audio(Protocol):
    def suspend(self) -> None: ...

    def resume(self) -> None: ...


class _MixerAudio:
    """Pauses and resumes every mixer channel."""

    def suspend(self) -> None:
        import pygame

        if pygame.mixer.get_init():
            pygame.mixer.pause()

    def resume(self) -> None:
        import pygame

        if pygame.mixer.get_init():
            pygame.mixer.unpause()


def _no_keys() -> KeyboardState:
    return KeyboardState()


class Game:
    """Ties the frame timer, resources and scenes together."""

    def __init__(
        self,
        base_dir: str | Path = ".",
        resources: ResourceManager | None = None,
        renderer: Renderer | None = None,
        timer: StepTimer | None = None,
        audio: Audio | None = None,
        keyboard: Callable[[], KeyboardState] = _no_keys,
    ) -> None:
        self.base_dir = Path(base_dir)
        self.resources = resources
        self.renderer = renderer
        self.timer = timer if timer is not None else StepTimer()
        self.audio: Audio = audio if audio is not None else _MixerAudio()
        self.keyboard = keyboard
        self.scene_manager = SceneManager()
        self.projection = Matrix.identity()
        self.debug_camera: DebugCamera | None = None
        self._output_size: tuple[int, int] | None = None

    @property
    def default_size(self) -> tuple[int, int]:
        """Preferred window size."""
        return DEFAULT_SIZE

    @property
    def output_size(self) -> tuple[int, int] | None:
        """Current window size, or None before initialization."""
        return self._output_size

    def initialize(self, width: int, height: int) -> None:
        """Load resources, register the scenes and start on the title."""
        self._output_size = (width, height)
        if self.resources is None:
            self.resources = ResourceManager(self.base_dir)
        for name in MODELS:
            self.resources.load_model(name)
        for name in TEXTURES:
            self.resources.load_texture(name)

        self._update_projection()

        manager = self.scene_manager
        manager.register("Title", TitleScene(manager, self.resources))
        manager.register("Game", GameScene(manager, self.resources, self.base_dir))
        manager.register("Result", ResultScene(manager, self.resources))
        manager.register("StageSelect", StageSelectScene(manager, self.resources))
        manager.set_start_scene("Title")

        self.debug_camera = DebugCamera(width, height)

    def _update_projection(self) -> None:
        if self._output_size is None:
            return
        width, height = self._output_size
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.projection = Matrix.perspective_fov(
            FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE
        )

    def tick(self) -> None:
        """Run the due updates, then draw a frame."""
        self.timer.tick(self._update)
        self._render()

    def _update(self) -> None:
        elapsed = float(self.timer.elapsed_seconds)
        self.scene_manager.update(self.keyboard(), elapsed)

    def _render(self) -> None:
        if self.timer.frame_count == 0 or self.renderer is None:
            return
        renderer = self.renderer
        renderer.clear()
        self.scene_manager.render(renderer)
        renderer.draw_text(f"FPS={self.timer.frames_per_second}", (0, 0))
        renderer.present()

    def on_suspending(self) -> None:
        self.audio.suspend()

    def on_resuming(self) -> None:
        self.timer.reset_elapsed_time()
        self.audio.resume()

    def on_window_size_changed(self, width: int, height: int) -> bool:
        """Adopt a new window size; False when uninitialized or unchanged."""
        if self._output_size is None:
            return False
        if (width, height) == self._output_size:
            return False
        self._output_size = (width, height)
        self._update_projection()
        return True


class _SilentEffect:
    def play(self, loops: int = 0) -> None:
        return None


class _PygameRenderer:
    """Draws sprites, wireframe models and text onto a pygame surface."""

    BACKGROUND = (100, 149, 237)
    LINE_COLOR = (255, 255, 255)

    def __init__(self, surface: Any) -> None:
        import pygame

        pygame.font.init()
        self._pygame = pygame
        self.surface = surface
        self.projection = Matrix.identity()
        self._font = pygame.font.SysFont(None, 24)
        self._cube = draw_box(Vector3(), Vector3(1.0, 1.0, 1.0))

    def clear(self) -> None:
        self.surface.fill(self.BACKGROUND)

    def draw_sprite(self, texture: Any, position: tuple[float, float]) -> None:
        if texture is not None:
            self.surface.blit(texture, position)

    def _to_screen(self, point: Vector3, m: Matrix) -> tuple[float, float] | None:
        x, y, z = point
        clip = [x * m[0][c] + y * m[1][c] + z * m[2][c] + m[3][c] for c in range(4)]
        w = clip[3]
        if w <= NEAR_PLANE:
            return None
        width, height = self.surface.get_size()
        return (
            (clip[0] / w + 1.0) * 0.5 * width,
            (1.0 - clip[1] / w) * 0.5 * height,
        )

    def draw_model(self, model: Any, world: Matrix, view: Matrix) -> None:
        transform = world @ view @ self.projection
        for start, end in self._cube.segments():
            a = self._to_screen(start.position, transform)
            b = self._to_screen(end.position, transform)
            if a is not None and b is not None:
                self._pygame.draw.line(self.surface, self.LINE_COLOR, a, b)

    def draw_text(self, text: str, position: tuple[float, float]) -> None:
        self.surface.blit(self._font.render(text, True, self.LINE_COLOR), position)

    def present(self) -> None:
        self._pygame.display.flip()


def _read_keyboard() -> KeyboardState:
    import pygame

    pressed = pygame.key.get_pressed()
    return KeyboardState(
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
        up=bool(pressed[pygame.K_UP]),
        down=bool(pressed[pygame.K_DOWN]),
        space=bool(pressed[pygame.K_SPACE]),
        enter=bool(pressed[pygame.K_RETURN]),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the game until it is closed."""
    import pygame

    parser = argparse.ArgumentParser(prog="jumpin", description="Run the game.")
    parser.add_argument(
        "--resources", default=".", help="directory holding the Resources folder"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        pygame.mixer.init()
        audio_available = True
    except pygame.error:
        audio_available = False

    def load_texture(path: Path) -> Any:
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError):
            return None

    def load_sound(path: Path) -> Any:
        if not audio_available:
            return _SilentEffect()
        try:
            return pygame.mixer.Sound(str(path))
        except (pygame.error, OSError):
            return _SilentEffect()

    resources = ResourceManager(
        args.resources, texture_loader=load_texture, sound_loader=load_sound
    )
    game = Game(args.resources, resources=resources, keyboard=_read_keyboard)
    width, height = game.default_size
    try:
        surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(APP_NAME)
        renderer = _PygameRenderer(surface)
        game.renderer = renderer
        game.initialize(width, height)

        clock = pygame.time.Clock()
        suspended = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.WINDOWMINIMIZED and not suspended:
                    game.on_suspending()
                    suspended = True
                elif event.type == pygame.WINDOWRESTORED and suspended:
                    game.on_resuming()
                    suspended = False
                elif event.type == pygame.WINDOWSIZECHANGED:
                    game.on_window_size_changed(event.x, event.y)
            renderer.projection = game.projection
            game.tick()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0