"""Main entry point for the PyGame memory match UI."""

import logging
import sys

import pygame

from config import config
from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.scenes.game_scene import GameScene

logger = logging.getLogger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self):
        """Initialize the application."""
        pygame.init()
        pygame.display.set_caption("Memory Match")

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.screen.fill(COLORS.BACKGROUND)
        self.clock = pygame.time.Clock()
        self.running = True

        self.scene = GameScene()
        self.scene.on_enter()

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                continue

            self.scene.handle_event(event)

    def update(self, dt: float) -> None:
        """Update application state.

        Args:
            dt: Delta time in seconds
        """
        self.scene.update(dt)

    def draw(self) -> None:
        """Render the application."""
        self.scene.draw(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main application loop."""
        logger.info("Starting memory match")
        while self.running:
            dt = self.clock.tick(DIMENSIONS.TARGET_FPS) / 1000.0

            self.handle_events()
            self.update(dt)
            self.draw()

        self.scene.on_exit()
        pygame.quit()


def main() -> None:
    """Entry point for the pygame UI."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = Application()
    app.run()
    sys.exit()


if __name__ == "__main__":
    main()
