from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pygame

from .projection import graticule, to_screen
from .rover import Heading, RoverState
from .session import Command
from .world import Obstacle


Color = Tuple[int, int, int]

THEME = {
    "bg": (250, 250, 250),
    "grid": (40, 40, 40),
    "border": (0, 0, 0),
    "obstacle_fill": (120, 85, 60),
    "obstacle_edge": (70, 45, 30),
    "rover_fill": (220, 30, 30),
    "rover_arrow": (120, 10, 10),
    "panel_bg": (235, 235, 240),
    "button_bg": (210, 214, 222),
    "button_hover": (190, 196, 208),
    "button_border": (90, 96, 110),
    "text": (20, 20, 30),
    "alert_bg": (200, 40, 40),
    "alert_text": (255, 255, 255),
}

# Keyboard bindings belong to the presentation layer, not the session.
KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_f: Command.MOVE_FORWARD,
    pygame.K_b: Command.MOVE_BACKWARD,
    pygame.K_l: Command.ROTATE_LEFT,
    pygame.K_r: Command.ROTATE_RIGHT,
}

BUTTON_LABELS: Tuple[Tuple[str, Command], ...] = (
    ("Move Forward", Command.MOVE_FORWARD),
    ("Move Backward", Command.MOVE_BACKWARD),
    ("Rotate Left", Command.ROTATE_LEFT),
    ("Rotate Right", Command.ROTATE_RIGHT),
)

# Screen direction of each heading (north is up).
_HEADING_VECTORS: Dict[Heading, Tuple[int, int]] = {
    Heading.NORTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, 1),
    Heading.WEST: (-1, 0),
}


def format_session_summary(summary: Dict[str, Any]) -> str:
    """One-line panel text from a session summary."""
    return (
        f"Step: {summary['step']}   Obstacles: {summary['obstacle_count']}   "
        f"Threshold: {summary['collision_threshold']:.1f} deg"
    )


@dataclass
class Button:
    label: str
    command: Command
    rect: pygame.Rect


class PygameRenderer:
    """Square map view of the rover and obstacles plus a control panel.

    The map occupies the top ``grid_size`` x ``grid_size`` pixels; buttons,
    the coordinate readout and the collision banner sit in the panel below.
    """

    def __init__(
        self,
        obstacles: Sequence[Obstacle],
        grid_size: int,
        panel_height: int = 110,
        show_graticule: bool = True,
        graticule_lines: int = 10,
        collision_message_frames: int = 90,
    ) -> None:
        pygame.init()
        pygame.display.set_caption("Mars Rover Simulator")
        self.grid_size = grid_size
        self.panel_height = panel_height
        self.screen = pygame.display.set_mode((grid_size, grid_size + panel_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)

        self.obstacles = obstacles
        self.show_graticule = show_graticule
        self.graticule = graticule(graticule_lines, grid_size)
        self.collision_message_frames = collision_message_frames

        self._message: Optional[str] = None
        self._message_frames_left = 0
        self.buttons = self._layout_buttons()

    def _layout_buttons(self) -> List[Button]:
        pad = 8
        n = len(BUTTON_LABELS)
        width = (self.grid_size - pad * (n + 1)) // n
        top = self.grid_size + pad
        buttons = []
        for i, (label, cmd) in enumerate(BUTTON_LABELS):
            rect = pygame.Rect(pad + i * (width + pad), top, width, 32)
            buttons.append(Button(label=label, command=cmd, rect=rect))
        return buttons

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def command_for_key(self, key: int) -> Optional[Command]:
        return KEY_BINDINGS.get(key)

    def command_for_click(self, pos: Tuple[int, int]) -> Optional[Command]:
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                return button.command
        return None

    def show_message(self, message: str) -> None:
        """Show a banner in the panel for the configured number of frames."""
        self._message = message
        self._message_frames_left = self.collision_message_frames

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _draw_graticule(self) -> None:
        color = THEME["grid"]
        for y in self.graticule.lat_lines:
            pygame.draw.line(self.screen, color, (0, int(y)), (self.grid_size, int(y)), 1)
        for x in self.graticule.lon_lines:
            pygame.draw.line(self.screen, color, (int(x), 0), (int(x), self.grid_size), 1)

    def _draw_obstacles(self) -> None:
        for obs in self.obstacles:
            x, y = to_screen(obs.lat, obs.lon, self.grid_size)
            center = (int(x), int(y))
            pygame.draw.circle(self.screen, THEME["obstacle_fill"], center, 6)
            pygame.draw.circle(self.screen, THEME["obstacle_edge"], center, 6, 1)

    def _draw_rover(self, state: RoverState) -> None:
        x, y = to_screen(state.lat, state.lon, self.grid_size)
        center = (int(x), int(y))
        pygame.draw.circle(self.screen, THEME["rover_fill"], center, 5)
        dx, dy = _HEADING_VECTORS[state.heading]
        tip = (center[0] + dx * 12, center[1] + dy * 12)
        pygame.draw.line(self.screen, THEME["rover_arrow"], center, tip, 2)

    def _draw_panel(self, state: RoverState, summary: Optional[Dict[str, Any]] = None) -> None:
        panel = pygame.Rect(0, self.grid_size, self.grid_size, self.panel_height)
        pygame.draw.rect(self.screen, THEME["panel_bg"], panel)
        pygame.draw.line(self.screen, THEME["border"], (0, self.grid_size), (self.grid_size, self.grid_size), 1)

        mouse = pygame.mouse.get_pos()
        for button in self.buttons:
            bg = THEME["button_hover"] if button.rect.collidepoint(mouse) else THEME["button_bg"]
            pygame.draw.rect(self.screen, bg, button.rect)
            pygame.draw.rect(self.screen, THEME["button_border"], button.rect, 1)
            surf = self.font.render(button.label, True, THEME["text"])
            self.screen.blit(surf, surf.get_rect(center=button.rect.center))

        text = (
            f"Coordinates: Latitude: {state.lat:.2f}, Longitude: {state.lon:.2f}, "
            f"Orientation: {state.heading.value}"
        )
        surf = self.font.render(text, True, THEME["text"])
        self.screen.blit(surf, (8, self.grid_size + 48))

        if self._message is not None and self._message_frames_left > 0:
            surf = self.font.render(f"  {self._message}  ", True, THEME["alert_text"])
            r = surf.get_rect(topleft=(8, self.grid_size + 70))
            pygame.draw.rect(self.screen, THEME["alert_bg"], r.inflate(6, 6))
            self.screen.blit(surf, r)
            self._message_frames_left -= 1

        if summary is not None:
            surf = self.font.render(format_session_summary(summary), True, THEME["text"])
            self.screen.blit(surf, (8, self.grid_size + 92))

    def draw(self, rover_state: RoverState, summary: Optional[Dict[str, Any]] = None) -> None:
        """Render one frame. ``summary`` is ``Simulation.to_dict()`` output."""
        self.screen.fill(THEME["bg"])
        if self.show_graticule:
            self._draw_graticule()
        self._draw_obstacles()
        self._draw_rover(rover_state)
        pygame.draw.rect(self.screen, THEME["border"], pygame.Rect(0, 0, self.grid_size, self.grid_size), 1)
        self._draw_panel(rover_state, summary)
        pygame.display.flip()

    def tick(self, target_fps: int) -> float:
        """Cap frame rate and return achieved FPS."""
        fps = self.clock.get_fps()
        self.clock.tick(target_fps)
        return fps

    def close(self) -> None:
        pygame.quit()
