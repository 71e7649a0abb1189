import pygame
from typing import Optional, Tuple
from mazer.core.grid import Grid
from mazer.viz.replay import StepAdapter
from mazer.viz.recorder import VideoRecorder

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160) # Blue tint
    COLOR_HEAD = (255, 80, 160)
    COLOR_START = (0, 200, 120)
    COLOR_EXIT = (255, 215, 0) # Gold

    def __init__(self, grid: Grid, adapter: Optional[StepAdapter] = None,
                 start: Tuple[int, int] = (0, 0), exit_pos: Optional[Tuple[int, int]] = None,
                 delay_ms: float = 15.0, width=1280, height=720, record=False,
                 close_when_done=False):
        self.grid = grid
        self.adapter = adapter
        self.start = start
        self.exit_pos = exit_pos if exit_pos is not None else (grid.width - 1, grid.height - 1)
        self.delay_ms = delay_ms
        self.screen_width = width
        self.screen_height = height
        self.close_when_done = close_when_done

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.replay_finished = adapter is None
        self._pending_ms = 0.0

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        # Center
        self.offset_x = (self.screen_width - self.grid.width * self.cell_size) / 2
        self.offset_y = (self.screen_height - self.grid.height * self.cell_size) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Mazer - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_f:
                    self.fit_to_screen()

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.5, min(200.0, self.cell_size))

                # Keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if event.buttons[0] or event.buttons[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def advance(self, elapsed_ms: float, replay_iter):
        """Feeds the replay one step per delay_ms of elapsed time."""
        if self.delay_ms <= 0:
            budget = 1000
        else:
            self._pending_ms += elapsed_ms
            budget = int(self._pending_ms // self.delay_ms)
            self._pending_ms -= budget * self.delay_ms

        try:
            for _ in range(budget):
                next(replay_iter)
        except StopIteration:
            self.replay_finished = True

    def fill_cell(self, x, y, color, inset=0):
        sx, sy = self.world_to_screen(x, y)
        size = int(self.cell_size) + 1 - 2 * inset
        if size > 0:
            pygame.draw.rect(self.surface, color, (int(sx) + inset, int(sy) + inset, size, size))

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        # Culling: Calculate visible cell range
        start_x = max(0, int((-self.offset_x) / self.cell_size))
        start_y = max(0, int((-self.offset_y) / self.cell_size))
        end_x = min(self.grid.width, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.grid.height, int((self.screen_height - self.offset_y) / self.cell_size) + 1)

        # 1. Backgrounds
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                if self.grid.is_visited(x, y):
                    self.fill_cell(x, y, self.COLOR_VISITED)

        self.fill_cell(*self.start, self.COLOR_START, inset=2)
        self.fill_cell(*self.exit_pos, self.COLOR_EXIT, inset=2)

        # 2. Walls
        if self.cell_size > 4.0:
            size = int(self.cell_size) + 1
            for y in range(start_y, end_y):
                for x in range(start_x, end_x):
                    px, py = self.world_to_screen(x, y)
                    px, py = int(px), int(py)

                    if self.grid.has_wall(x, y, Grid.SOUTH):
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                    if self.grid.has_wall(x, y, Grid.EAST):
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)
                    if y == 0 and self.grid.has_wall(x, y, Grid.NORTH):
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                    if x == 0 and self.grid.has_wall(x, y, Grid.WEST):
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

        # Carve head on top
        if self.adapter is not None and self.adapter.cursor is not None:
            self.fill_cell(*self.adapter.cursor, self.COLOR_HEAD, inset=max(1, int(self.cell_size) // 4))

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.grid.width * self.grid.height
        status = "Done" if self.replay_finished else "Generating"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({cells:,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]
        if self.adapter is not None:
            info.append(f"Steps: {self.adapter.applied:,}")
        if self.recorder.active:
            info.append("REC")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        replay_iter = self.adapter.run() if self.adapter is not None else None

        while self.running:
            self.handle_input()

            elapsed = self.clock.tick(60)
            if replay_iter is not None and not self.replay_finished:
                self.advance(elapsed, replay_iter)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            if self.replay_finished and self.close_when_done:
                self.running = False

        self.recorder.stop()
        pygame.quit()
