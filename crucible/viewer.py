# crucible/viewer.py (step-through search viewer)
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence
import logging
import os
import pygame

from .grid import CostGrid
from .profiles import CrucibleProfile, NORMAL, ULTRA
from .solver import SearchStatus, Solver
from .types import Coord
from .viz import blend, heat_color

logger = logging.getLogger(__name__)


@dataclass
class Colors:
    BG = (18, 18, 22)
    EXPANDED = (120, 170, 230)
    CURRENT = (220, 90, 90)
    PATH = (30, 60, 160)
    START = (100, 220, 120)
    GOAL = (255, 170, 80)
    GRID = (60, 60, 70)


def _is_cmd_ctrl_f(event):
    mods = event.mod
    KMOD_CMD = getattr(pygame, "KMOD_META", 0) | getattr(pygame, "KMOD_GUI", 0)
    return event.key == pygame.K_f and (mods & pygame.KMOD_CTRL) and (mods & KMOD_CMD)


class Viewer:
    def __init__(self, grid: CostGrid, profiles: Sequence[CrucibleProfile] = (NORMAL, ULTRA),
                 cell_size: int = 24, fps: int = 60, steps_per_frame: int = 20,
                 fullscreen: bool = False, env_dir: Optional[str] = None):
        self.grid = grid
        self.profiles = list(profiles)
        self.profile_index = 0
        self.cell = cell_size
        self.fps = fps
        self.steps_per_frame = steps_per_frame
        self.env_dir = env_dir
        self.env_files: List[str] = []
        self.env_index = -1

        self.autopilot = False
        self.show_grid = False
        self.fullscreen = fullscreen
        self._recreate_display()
        self.clock = pygame.time.Clock()

        self._reset_state()
        if self.env_dir:
            self._find_env_files()

    @property
    def profile(self) -> CrucibleProfile:
        return self.profiles[self.profile_index]

    # ----------------- display / fullscreen -----------------
    def _recreate_display(self) -> None:
        W, H = self.grid.width * self.cell, self.grid.height * self.cell
        flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
        self.screen = pygame.display.set_mode((W, H), flags)

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._recreate_display()

    # ----------------- search -----------------
    def _reset_state(self) -> None:
        self.solver = Solver(self.grid, self.profile)
        self.path: List[Coord] = []
        self._update_caption()

    def _find_env_files(self) -> None:
        if self.env_dir and os.path.isdir(self.env_dir):
            self.env_files = sorted(f for f in os.listdir(self.env_dir) if f.endswith(".txt"))

    def _load_env_by_index(self, index: int) -> None:
        if not self.env_files or not (0 <= index < len(self.env_files)):
            return
        self.env_index = index
        filepath = os.path.join(self.env_dir, self.env_files[self.env_index])
        logger.info("loading %s", filepath)
        self.grid = CostGrid.load(filepath)
        self._recreate_display()
        self._reset_state()

    def _advance(self, n: int) -> None:
        for _ in range(n):
            if self.solver.step() is not SearchStatus.RUNNING:
                break
        if self.solver.status is SearchStatus.SOLVED:
            self.path = self.solver.result.cells
            self.autopilot = False
        elif self.solver.status is SearchStatus.EXHAUSTED:
            self.autopilot = False
        self._update_caption()

    def _update_caption(self) -> None:
        s = self.solver
        if s.status is SearchStatus.SOLVED:
            tail = f"cost {s.result.cost}"
        elif s.status is SearchStatus.EXHAUSTED:
            tail = "no path"
        else:
            tail = f"frontier {len(s.frontier)}"
        pygame.display.set_caption(
            f"Crucible [{self.profile.name}] expanded {len(s.visited)} | {tail}")

    # ----------------- draw -----------------
    def draw(self) -> None:
        cell = self.cell
        scr = self.screen
        scr.fill(Colors.BG)

        lo = min(min(row) for row in self.grid.cells)
        hi = max(max(row) for row in self.grid.cells)
        expanded = self.solver.visited.cells()
        for (x, y) in self.grid.coords():
            color = heat_color(self.grid.get((x, y)), lo, hi)
            if (x, y) in expanded:
                color = blend(color, Colors.EXPANDED, 0.45)
            scr.fill(color, pygame.Rect(x * cell, y * cell, cell, cell))

        for (x, y), color in ((self.grid.start, Colors.START), (self.grid.goal, Colors.GOAL)):
            pygame.draw.rect(scr, color, pygame.Rect(x * cell + 4, y * cell + 4, cell - 8, cell - 8), border_radius=6)

        if len(self.path) > 1:
            pts = [(x * cell + cell // 2, y * cell + cell // 2) for (x, y) in self.path]
            pygame.draw.lines(scr, Colors.PATH, False, pts, max(2, cell // 5))

        if self.solver.last is not None and self.solver.status is SearchStatus.RUNNING:
            x, y = self.solver.last.state.coord
            pygame.draw.rect(scr, Colors.CURRENT, pygame.Rect(x * cell + 6, y * cell + 6, cell - 12, cell - 12),
                             border_radius=8)

        if self.show_grid:
            W, H = self.grid.width * cell, self.grid.height * cell
            for i in range(self.grid.width + 1):
                pygame.draw.line(scr, Colors.GRID, (i * cell, 0), (i * cell, H))
            for j in range(self.grid.height + 1):
                pygame.draw.line(scr, Colors.GRID, (0, j * cell), (W, j * cell))

        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.autopilot = not self.autopilot
                    elif event.key == pygame.K_n:
                        self._advance(1)
                    elif event.key == pygame.K_r:
                        self._reset_state()
                    elif event.key == pygame.K_p:
                        self.profile_index = (self.profile_index + 1) % len(self.profiles)
                        logger.info("profile set to %s", self.profile.name)
                        self._reset_state()
                    elif event.key == pygame.K_g:
                        self.grid = CostGrid.random(self.grid.width, self.grid.height)
                        self._reset_state()
                    elif event.key == pygame.K_LEFTBRACKET and self.env_files:
                        self._load_env_by_index((self.env_index - 1 + len(self.env_files)) % len(self.env_files))
                    elif event.key == pygame.K_RIGHTBRACKET and self.env_files:
                        self._load_env_by_index((self.env_index + 1) % len(self.env_files))
                    elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                        self.steps_per_frame = min(self.steps_per_frame * 2, 100000)
                    elif event.key == pygame.K_MINUS:
                        self.steps_per_frame = max(self.steps_per_frame // 2, 1)
                    elif event.key == pygame.K_h:
                        self.show_grid = not self.show_grid
                    elif (event.key == pygame.K_RETURN and (event.mod & pygame.KMOD_ALT)) or _is_cmd_ctrl_f(event):
                        self.toggle_fullscreen()
                    elif event.key == pygame.K_F11:
                        self.toggle_fullscreen()

            if self.autopilot:
                self._advance(self.steps_per_frame)

            self.draw()


def view(grid: CostGrid, profiles: Sequence[CrucibleProfile] = (NORMAL, ULTRA), **kwargs) -> None:
    pygame.init()
    try:
        Viewer(grid, profiles, **kwargs).run()
    finally:
        pygame.quit()
