"""The flocking scene: a group of randomly placed boids, labels and key handling."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from typing import Protocol

from lifeboids.boids.entity import BaseEntity, BoidEntity, ColorRGBA
from lifeboids.boids.flock import FlockBehavior
from lifeboids.boids.group import BoidGroup
from lifeboids.boids.vector import Vector2D

KEY_ESC = 27
INITIAL_BOIDS = 600
BOIDS_PER_BATCH = 20
BOID_WIDTH = 10
BOID_HEIGHT = 20
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


def _key_code(key: int | str) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"key must be a single character, got {key!r}")
        return ord(key)
    return int(key)


class KeyboardReceiver(Protocol):
    """Anything that wants to hear about pressed keys."""

    def handle_pressed_key(self, key: int) -> None:
        ...


class InputManager:
    """Hands keyboard events to every registered receiver, in registration order."""

    def __init__(self) -> None:
        self._keyboard_receivers: list[KeyboardReceiver] = []

    @property
    def keyboard_receivers(self) -> list[KeyboardReceiver]:
        return list(self._keyboard_receivers)

    def add_keyboard_receiver(self, receiver: KeyboardReceiver) -> None:
        """Register a receiver for pressed keys."""
        self._keyboard_receivers.append(receiver)

    def handle_key_press(self, key: int | str) -> None:
        """Forward a pressed key to every receiver."""
        code = _key_code(key)
        for receiver in list(self._keyboard_receivers):
            receiver.handle_pressed_key(code)


class LabelEntity(BaseEntity):
    """A line of text placed in the scene."""

    def __init__(self, text: str = "", position: Vector2D | None = None) -> None:
        super().__init__(position=position)
        self.text = text
        self.color = ColorRGBA(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class BoidSprite:
    """How one boid is to be drawn."""

    position: Vector2D
    angle: float
    color: ColorRGBA
    heading: tuple[Vector2D, Vector2D]


@dataclass
class SceneFrame:
    """Everything one render call produces."""

    boids: list[BoidSprite] = field(default_factory=list)
    labels: list[LabelEntity] = field(default_factory=list)


class FlockingBoidScene:
    """A flock of boids kept inside a width x height area."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("scene width and height must be at least 1")
        self.width = width
        self.height = height
        self._spawn_width = width
        self._spawn_height = height
        self._rng = rng if rng is not None else random.Random()
        self.input_manager = InputManager()
        self.group: BoidGroup | None = None
        self.count_label: LabelEntity | None = None
        self.profiler_label: LabelEntity | None = None

    def _require_group(self) -> BoidGroup:
        if self.group is None:
            raise RuntimeError("scene is not initialised")
        return self.group

    def init(self) -> None:
        """Register for keys, create the flock and its labels."""
        self.input_manager.add_keyboard_receiver(self)
        self.group = BoidGroup()
        self.group.set_behavior(FlockBehavior(self.width, self.height))
        for _ in range(INITIAL_BOIDS):
            self.add_boid()
        self.count_label = LabelEntity()
        self.profiler_label = LabelEntity(position=Vector2D(0.0, 25.0))

    def add_boid(self) -> BoidEntity:
        """Add one boid at a random place with random colour, heading and speed."""
        group = self._require_group()
        rng = self._rng
        boid = BoidEntity(BOID_WIDTH, BOID_HEIGHT)
        boid.position = Vector2D(
            float(rng.randint(0, self._spawn_width - 1)),
            float(rng.randint(0, self._spawn_height - 1)),
        )
        boid.set_color(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))
        boid.set_direction(Vector2D(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)))
        boid.velocity = rng.uniform(0.1, 10.0)
        group.add(boid)
        return boid

    def update(self) -> None:
        """Move the flock one step and refresh the labels."""
        group = self._require_group()
        behavior = group.behavior
        if isinstance(behavior, FlockBehavior):
            behavior.set_area_size(self.width, self.height)
        started = time.process_time()
        group.update()
        elapsed = time.process_time() - started
        if self.profiler_label is not None:
            self.profiler_label.text = f"Update Time: {elapsed:f} sec"
        if self.count_label is not None:
            self.count_label.text = (
                f"Boids Count: {len(group)} "
                f"(Press + to add {BOIDS_PER_BATCH} more boids to this scene)"
            )

    def render(self) -> SceneFrame:
        """Describe every boid and label to be drawn."""
        group = self._require_group()
        frame = SceneFrame(
            boids=[
                BoidSprite(boid.position, boid.angle, boid.color, boid.heading_line())
                for boid in group
            ]
        )
        frame.labels.extend(
            label for label in (self.count_label, self.profiler_label) if label is not None
        )
        return frame

    def release(self) -> None:
        """Drop the flock and labels."""
        if self.group is not None:
            self.group.release()
        self.group = None
        self.count_label = None
        self.profiler_label = None

    def handle_pressed_key(self, key: int | str) -> None:
        """Escape quits; '+' adds a batch of boids."""
        code = _key_code(key)
        if code == KEY_ESC:
            raise SystemExit(0)
        if code == ord("+"):
            for _ in range(BOIDS_PER_BATCH):
                self.add_boid()


def main(argv: list[str] | None = None) -> int:
    """Run the flock for a number of frames and print the scene labels."""
    parser = argparse.ArgumentParser(description="Flocking boids.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--frames", type=int, default=100)
    parser.add_argument("--batches", type=int, default=0,
                        help="times to press '+' before running")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.frames < 0 or args.batches < 0:
        parser.error("--frames and --batches must not be negative")

    scene = FlockingBoidScene(args.width, args.height, random.Random(args.seed))
    scene.init()
    try:
        for _ in range(args.batches):
            scene.input_manager.handle_key_press("+")
        for _ in range(args.frames):
            scene.update()
        for label in scene.render().labels:
            if label.text:
                print(label.text)
    finally:
        scene.release()
    return 0