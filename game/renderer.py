import pygame

from config import (
    BLACK,
    BOARD_COLOR,
    BUTTON_ACTIVE_COLOR,
    BUTTON_COLOR,
    CELL_PX,
    DARK_GREY,
    FOOD_COLOR,
    GREY,
    GRID_LINE_COLOR,
    INFO_PANEL_COLOR,
    RED,
    SNAKE_BODY_COLOR,
    SNAKE_HEAD_COLOR,
    WHITE,
    YELLOW,
)
from game.controls import Command
from game.engine import Phase
from game.snake import Direction


def cell_rect(cell, cell_px=CELL_PX):
    """Pixel rect of a snake segment, inset by one pixel on each side."""
    x, y = cell
    return pygame.Rect(x * cell_px + 1, y * cell_px + 1, cell_px - 2, cell_px - 2)


def cell_center(cell, cell_px=CELL_PX):
    x, y = cell
    return (x * cell_px + cell_px // 2, y * cell_px + cell_px // 2)


def draw_background(surface, width, height, cell_px=CELL_PX):
    """Fill the board and draw the grid lines."""
    board = pygame.Rect(0, 0, width * cell_px, height * cell_px)
    surface.fill(BOARD_COLOR, board)
    for i in range(width + 1):
        x = min(i * cell_px, board.right - 1)
        pygame.draw.line(surface, GRID_LINE_COLOR, (x, 0), (x, board.bottom - 1))
    for i in range(height + 1):
        y = min(i * cell_px, board.bottom - 1)
        pygame.draw.line(surface, GRID_LINE_COLOR, (0, y), (board.right - 1, y))


def draw_eyes(surface, head, direction, cell_px=CELL_PX):
    """Two small eyes on the head, placed toward the heading."""
    cx, cy = cell_center(head, cell_px)
    dx, dy = direction.value
    eye = max(2, cell_px // 7)
    ahead = cell_px // 5
    apart = cell_px // 4
    # Perpendicular to the heading
    px, py = -dy, dx
    for side in (-1, 1):
        ex = cx + dx * ahead + px * apart * side
        ey = cy + dy * ahead + py * apart * side
        pygame.draw.rect(surface, BOARD_COLOR, (ex - eye // 2, ey - eye // 2, eye, eye))


def draw_snake(surface, snake, direction=Direction.RIGHT, cell_px=CELL_PX):
    """Draw each segment as a filled square; the head is darker with eyes."""
    for i, segment in enumerate(snake):
        color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
        pygame.draw.rect(surface, color, cell_rect(segment, cell_px))
    if snake:
        draw_eyes(surface, snake[0], direction, cell_px)


def draw_food(surface, food, cell_px=CELL_PX):
    if food is None:
        return
    radius = max(1, cell_px // 2 - 2)
    pygame.draw.circle(surface, FOOD_COLOR, cell_center(food, cell_px), radius)


def draw_board(surface, state, cell_px=CELL_PX):
    """Render background, grid, snake and food for a game state."""
    draw_background(surface, state.width, state.height, cell_px)
    prev_clip = surface.get_clip()
    try:
        surface.set_clip(pygame.Rect(0, 0, state.width * cell_px, state.height * cell_px))
        draw_snake(surface, state.snake, state.direction, cell_px)
        draw_food(surface, state.food, cell_px)
    finally:
        surface.set_clip(prev_clip)


PHASE_HINTS = {
    Phase.READY: "Space to start",
    Phase.RUNNING: "Space to pause",
    Phase.PAUSED: "Space to resume",
    Phase.ENDED: "Space to play again",
}


class Renderer:
    """Draws the board, info panel and overlays onto the window."""

    def __init__(self, screen, cell_px=CELL_PX):
        self.screen = screen
        self.cell_px = cell_px
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)

    def board_rect(self, state):
        return pygame.Rect(0, 0, state.width * self.cell_px, state.height * self.cell_px)

    def draw_text(self, text, pos, color=WHITE, font=None):
        """Draw text centred on ``pos``."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        self.screen.blit(text_surface, text_rect)

    def draw(self, state, panel_x, buttons=(), muted=False, fps=None,
             flash=False, confirm_exit=False):
        """Draw one full frame."""
        self.screen.fill(BLACK)
        draw_board(self.screen, state, self.cell_px)
        if flash:
            self.draw_flash(state)
        self.draw_overlay(state)
        self.draw_hud(state, panel_x, buttons, muted)
        if fps is not None:
            self.draw_game_fps(state, fps)
        if confirm_exit:
            self.draw_exit_confirmation(state)

    def draw_hud(self, state, panel_x, buttons=(), muted=False):
        """Score, high score and controls in the info panel."""
        height = self.screen.get_height()
        panel = pygame.Rect(panel_x, 0, self.screen.get_width() - panel_x, height)
        self.screen.fill(INFO_PANEL_COLOR, panel)

        base_x = panel_x + 10
        score_text = self.small_font.render(f"Score: {state.score}", True, WHITE)
        self.screen.blit(score_text, (base_x, 10))
        hs_text = self.small_font.render(f"High: {state.high_score}", True, YELLOW)
        self.screen.blit(hs_text, (base_x, 34))
        hint_text = self.small_font.render(PHASE_HINTS[state.phase], True, GREY)
        self.screen.blit(hint_text, (base_x, 58))
        if muted:
            mute_text = self.small_font.render("MUTED", True, RED)
            self.screen.blit(mute_text, (panel.right - mute_text.get_width() - 10, 10))

        for button in buttons:
            active = button.command is Command.ACTION and state.phase is Phase.RUNNING
            color = BUTTON_ACTIVE_COLOR if active else BUTTON_COLOR
            pygame.draw.rect(self.screen, color, button.rect, border_radius=6)
            self.draw_text(button.label, button.rect.center, WHITE, self.small_font)

    def draw_overlay(self, state):
        """Dim the board and show the phase message when not running."""
        if state.phase is Phase.RUNNING:
            return
        board = self.board_rect(state)
        overlay = pygame.Surface(board.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        self.screen.blit(overlay, board.topleft)

        cx, cy = board.center
        if state.phase is Phase.READY:
            self.draw_text("Ready to Play?", (cx, cy - 20))
            self.draw_text("Collect orange food to grow your snake!", (cx, cy + 20),
                           GREY, self.small_font)
        elif state.phase is Phase.PAUSED:
            self.draw_text("Game Paused", (cx, cy), YELLOW)
        else:
            self.draw_text("Game Over!", (cx, cy - 30), RED)
            self.draw_text(f"Final Score: {state.score}", (cx, cy + 5), WHITE, self.small_font)
            if state.score > 0 and state.score == state.high_score:
                self.draw_text("New High Score!", (cx, cy + 35), YELLOW, self.small_font)

    def draw_flash(self, state):
        """Red flash over the board right after a crash."""
        board = self.board_rect(state)
        flash_surface = pygame.Surface(board.size, pygame.SRCALPHA)
        flash_surface.fill((255, 0, 0, 100))
        self.screen.blit(flash_surface, board.topleft)

    def draw_game_fps(self, state, fps):
        """Draw FPS counter in the bottom-left of the board."""
        fps_surf = self.small_font.render(f"FPS: {int(fps)}", True, DARK_GREY)
        y = self.board_rect(state).bottom - fps_surf.get_height() - 4
        self.screen.blit(fps_surf, (4, y))

    def draw_exit_confirmation(self, state):
        board = self.board_rect(state)
        overlay = pygame.Surface(board.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.screen.blit(overlay, (0, 0))

        msg = "Quit? Press Y to confirm, N or Esc to cancel"
        text_surf = self.small_font.render(msg, True, WHITE)
        text_rect = text_surf.get_rect(center=board.center)
        pad = 12
        box_rect = text_rect.inflate(pad * 2, pad * 2)
        pygame.draw.rect(self.screen, (40, 40, 40), box_rect, border_radius=6)
        self.screen.blit(text_surf, text_rect)
