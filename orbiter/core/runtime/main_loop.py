"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and core systems
- Maintain fixed timestep update loop
- Coordinate event handling, updates, and rendering
"""

import pygame

from orbiter.core.runtime.game_settings import Display, Physics
from orbiter.core.services.input_manager import InputManager
from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.entities.orbit.orbit_config import ORBIT_CONFIG_FILE
from orbiter.graphics.draw_manager import DrawManager
from orbiter.scenes.orbit_scene import OrbitScene


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Implements a fixed timestep for logic with variable rendering.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config_file=None, max_frames=0):
        """
        Initialize pygame and all core systems.

        Args:
            config_file: Orbit config to load (default orbit.json)
            max_frames: Stop after this many rendered frames (0 = run until quit)
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()

        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.scene = OrbitScene(self.input_manager, config_file or ORBIT_CONFIG_FILE)

        self.clock = pygame.time.Clock()
        self.running = True
        self.max_frames = max_frames
        self.frame_count = 0

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()

        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute main game loop until quit.

        Uses fixed timestep for updates with accumulator pattern.
        Rendering happens once per frame after all updates.
        """
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        self.scene.on_enter()

        while self.running:
            # Frame timing with safety clamp
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()

            while accumulator >= fixed_dt:
                self.input_manager.update()
                self.scene.update(fixed_dt)
                accumulator -= fixed_dt

            self._draw()

            self.frame_count += 1
            if self.max_frames and self.frame_count >= self.max_frames:
                self.running = False

        self.scene.on_exit()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Route quit, system hotkeys, then scene input."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            system_action = self.input_manager.handle_system_input(event)
            if system_action == "quit":
                self.running = False
                break
            if system_action == "toggle_debug":
                self.scene.toggle_overlay()
                continue

            self.scene.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.clear()
        self.scene.draw(self.draw_manager)
        self.draw_manager.render(self.screen)
        pygame.display.flip()
