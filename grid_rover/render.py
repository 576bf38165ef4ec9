from __future__ import annotations

from typing import List, Tuple

import pygame

from .heading import RoverState, delta_for
from .rover import Rover


Color = Tuple[int, int, int]

THEME = {
    "bg": (18, 22, 32),
    "grid": (40, 48, 66),
    "obstacle_fill": (45, 52, 70),
    "obstacle_edge": (85, 95, 120),
    "rover_fill": (100, 220, 255),
    "rover_outline": (40, 140, 200),
    "rover_arrow": (140, 240, 255),
    "trail_start": (60, 160, 200),
    "trail_end": (100, 220, 255),
    "blocked": (255, 90, 90),
    "hud_bg": (28, 34, 48),
    "hud_border": (55, 65, 88),
    "hud_text": (200, 220, 255),
}


class GridRenderer:
    """Top-down view of the grid, obstacles, rover and its trail.

    Cell (0, 0) is drawn at the bottom-left; screen y is flipped so that
    North points up.
    """

    def __init__(self, rover: Rover, cell_size: int = 48, show_trail: bool = True) -> None:
        pygame.init()
        pygame.display.set_caption("Grid Rover")
        self.rover = rover
        self.cell_size = cell_size
        self.show_trail = show_trail
        self.window_width = rover.grid.width * cell_size
        self.window_height = rover.grid.height * cell_size
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

    # ------------------------------------------------------------------
    # Coordinate transforms
    # ------------------------------------------------------------------
    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        sx = x * self.cell_size
        sy = self.window_height - (y + 1) * self.cell_size
        return pygame.Rect(sx, sy, self.cell_size, self.cell_size)

    def _cell_center(self, x: int, y: int) -> Tuple[int, int]:
        return self._cell_rect(x, y).center

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def draw(self) -> None:
        """Render one frame for the current rover state."""
        self.screen.fill(THEME["bg"])
        self._draw_grid()

        for obs in self.rover.obstacles:
            if not self.rover.grid.contains(obs.x, obs.y):
                continue
            rect = self._cell_rect(obs.x, obs.y).inflate(-4, -4)
            pygame.draw.rect(self.screen, THEME["obstacle_fill"], rect)
            pygame.draw.rect(self.screen, THEME["obstacle_edge"], rect, 2)

        if self.show_trail:
            self._draw_trail(self.rover.path_history)

        self._draw_rover(self.rover.get_state())
        self._draw_hud(self.rover.status_report().format())
        pygame.display.flip()

    def _draw_grid(self) -> None:
        color = THEME["grid"]
        for i in range(self.rover.grid.width + 1):
            x = i * self.cell_size
            pygame.draw.line(self.screen, color, (x, 0), (x, self.window_height), 1)
        for j in range(self.rover.grid.height + 1):
            y = j * self.cell_size
            pygame.draw.line(self.screen, color, (0, y), (self.window_width, y), 1)

    def _draw_trail(self, history: List[RoverState]) -> None:
        if len(history) < 2:
            return
        pts = [self._cell_center(s.x, s.y) for s in history]
        n = len(pts) - 1
        start, end = THEME["trail_start"], THEME["trail_end"]
        for i in range(n):
            t = (i + 1) / n
            color = tuple(int(start[k] + t * (end[k] - start[k])) for k in range(3))
            pygame.draw.line(self.screen, color, pts[i], pts[i + 1], 2 if i == n - 1 else 1)

    def _draw_rover(self, state: RoverState) -> None:
        center = self._cell_center(state.x, state.y)
        radius_px = max(2, int(self.cell_size * 0.35))
        outline = THEME["rover_outline"]
        if self.rover.last_outcome is not None and not self.rover.last_outcome.succeeded:
            outline = THEME["blocked"]
        pygame.draw.circle(self.screen, THEME["rover_fill"], center, radius_px, 0)
        pygame.draw.circle(self.screen, outline, center, radius_px, 2)

        # Heading arrow; screen y grows downward
        dx, dy = delta_for(state.heading)
        head = (center[0] + dx * radius_px, center[1] - dy * radius_px)
        pygame.draw.line(self.screen, THEME["rover_arrow"], center, head, 4)

    def _draw_hud(self, text: str) -> None:
        pad = 6
        font = pygame.font.SysFont("monospace", 13)
        surf = font.render(f" {text} ", True, THEME["hud_text"])
        panel = surf.get_rect(topleft=(pad, pad)).inflate(pad, pad)
        pygame.draw.rect(self.screen, THEME["hud_bg"], panel)
        pygame.draw.rect(self.screen, THEME["hud_border"], panel, 1)
        self.screen.blit(surf, (panel.x + 3, panel.y + 3))

    def tick(self, target_fps: int) -> float:
        """Cap frame rate and return achieved FPS."""
        fps = self.clock.get_fps()
        self.clock.tick(target_fps)
        return fps

    def close(self) -> None:
        pygame.quit()
