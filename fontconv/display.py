# -*- coding: utf-8 -*-
#
#    Copyright © 2024 The fontconv Authors
#
#    This file is part of fontconv
#
#    fontconv is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    fontconv is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with fontconv.  If not see <http://www.gnu.org/licenses/>.
#
'''

Display
========================

This module encapsulates the PyGame library and draws packed glyphs on
PyGame surfaces, the same way a text terminal using the font would:
glyph ``c`` is the sixteen bytes at ``c * 16``, and pixel ``col`` of a
scanline is lit when ``(row >> col) & 1``.

'''
import pygame
from .layout import CHAR_H, CHAR_W, GLYPH_COUNT, ROW_NCHARS
from .repacker import FontConvError
from .util import log


INK = (0xff, 0xff, 0xff)
'Colour of set pixels.'

PAPER = (0, 0, 0)
'Colour of clear pixels.'

TEXT_COLUMNS, TEXT_ROWS = 80, 30
'Default size, in characters, of a text screen.'


def bits_of_byte(b):
  '''Yield eight bits, LSB to MSB, of a scanline byte.'''
  for _ in range(CHAR_W):
    yield b & 1
    b >>= 1


def draw_glyph(surface, font, cn, x, y, ink=INK, paper=PAPER):
  '''
  Paint glyph ``cn`` of ``font`` onto ``surface`` with its top-left
  corner at ``(x, y)``.  Pass ``paper=None`` to leave clear pixels alone.
  '''
  for py, row in enumerate(font.glyph(cn)):
    for px, bit in enumerate(bits_of_byte(row)):
      if bit:
        surface.set_at((x + px, y + py), ink)
      elif paper is not None:
        surface.set_at((x + px, y + py), paper)


def draw_text(surface, font, text, columns=TEXT_COLUMNS, origin=(0, 0),
              ink=INK, paper=PAPER):
  '''
  Lay ``text`` out on a grid of character cells ``columns`` wide,
  wrapping at the right edge and on newlines.  Characters map to glyphs
  through Latin-1; anything else is drawn as ``?``.

  Return the ``(column, row)`` of the cell after the last character.
  '''
  x0, y0 = origin
  col = row = 0
  for line_number, line in enumerate(text.split('\n')):
    if line_number:
      col, row = 0, row + 1
    for cn in line.encode('latin-1', 'replace'):
      if col >= columns:
        col, row = 0, row + 1
      draw_glyph(surface, font, cn, x0 + col * CHAR_W, y0 + row * CHAR_H, ink, paper)
      col += 1
  return col, row


def text_surface(font, text, columns=TEXT_COLUMNS, rows=TEXT_ROWS):
  '''Return a new surface of ``columns`` by ``rows`` cells with ``text`` on it.'''
  surface = pygame.Surface((columns * CHAR_W, rows * CHAR_H), 0, 32)
  surface.fill(PAPER)
  draw_text(surface, font, text, columns)
  return surface


def chart_size(columns=ROW_NCHARS, spacing=1):
  '''Return the pixel ``(width, height)`` of a chart.'''
  rows = -(-GLYPH_COUNT // columns)
  return (
    columns * (CHAR_W + spacing) + spacing,
    rows * (CHAR_H + spacing) + spacing,
    )


def render_chart(font, columns=ROW_NCHARS, spacing=1, grid=(0x40, 0x40, 0x40)):
  '''
  Return a surface showing every glyph of ``font``, ``columns`` to a row,
  separated by ``spacing`` pixels of ``grid`` colour.  With the default
  of 64 columns the chart has the same arrangement as the raw dump.
  '''
  surface = pygame.Surface(chart_size(columns, spacing), 0, 32)
  surface.fill(grid)
  for cn in range(GLYPH_COUNT):
    cr, cc = divmod(cn, columns)
    draw_glyph(
      surface,
      font,
      cn,
      spacing + cc * (CHAR_W + spacing),
      spacing + cr * (CHAR_H + spacing),
      )
  return surface


def save_picture(surface, path):
  '''
  Save ``surface`` to an image file, the format going by the extension
  of ``path``.
  '''
  try:
    pygame.image.save(surface, path)
  except (pygame.error, OSError) as err:
    raise FontConvError('unable to save %s: %s' % (path, err)) from err
  log('saved picture to %s', path)


def show_picture(surface, scale=2):
  '''
  Open a window showing ``surface`` and wait until it is closed.
  '''
  width, height = surface.get_size()
  pygame.init()
  try:
    screen = pygame.display.set_mode((width * scale, height * scale))
    pygame.display.set_caption('fontconv')
    screen.blit(pygame.transform.scale(surface, screen.get_size()), (0, 0))
    pygame.display.flip()
    while True:
      event = pygame.event.wait()
      if event.type == pygame.QUIT:
        break
      if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        break
  finally:
    pygame.quit()
