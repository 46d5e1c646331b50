"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# LAYOUT SYMBOLS
# =============================================================================
WALL_SYMBOL = '#'
PICKUP_SYMBOL = '.'
HUNTER_SYMBOL = 'P'
CHASER_SYMBOL = 'G'

# =============================================================================
# TIMING
# =============================================================================
TICK_MS = 50                  # wall-clock duration of one simulation step
CHASER_CADENCE = 2            # chasers move on every Nth tick (half speed)
TICK_MODULUS = 2 ** 32        # tick counter wraps like an unsigned 32-bit int

# =============================================================================
# DISPLAY GLYPHS
# =============================================================================
WALL_GLYPH = '#'
PICKUP_GLYPH = '.'
EMPTY_GLYPH = ' '
HUNTER_GLYPH = 'C'
CHASER_GLYPH = 'G'

WIN_BANNER = "YOU WIN!  R: restart  Esc: quit"
LOSE_BANNER = "GAME OVER  R: restart  Esc: quit"
