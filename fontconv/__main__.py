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
Read a raw glyph dump on stdin and write the packed font to stdout.

The optional arguments pick other files, and can show the result as
text or pictures.
'''
from argparse import ArgumentParser, FileType
import sys
from .layout import GLYPH_COUNT
from .repacker import FontConvError, PackedFont, read_dump, repack, write_font
from .util import glyph_chart, log, set_verbose


def glyph_number(text):
    n = int(text, 0)
    if not (0 <= n < GLYPH_COUNT):
        raise ValueError(text)
    return n


def make_arg_parser():
    '''
    Return an :py:class:`ArgumentParser` object.
    '''
    parser = ArgumentParser(
        prog='python -m fontconv',
        description='Convert a raw 64x4 grid of 8x16 glyphs into a packed bitmap font.',
        )
    parser.add_argument(
        '-i', '--input',
        type=FileType('rb'),
        default='-',
        help='raw glyph dump (default: stdin)',
        )
    # Not a FileType: the file is only opened once the font is packed,
    # so a failed run leaves it alone.
    parser.add_argument(
        '-o', '--output',
        metavar='FILE',
        help='packed font (default: stdout)',
        )
    parser.add_argument(
        '--packed',
        action='store_true',
        help='the input is already a packed font; only show it',
        )
    parser.add_argument(
        '--show',
        type=glyph_number,
        action='append',
        metavar='GLYPH',
        help='print a glyph as text on stderr (may be repeated)',
        )
    parser.add_argument(
        '--text',
        help='picture TEXT on an 80x30 screen instead of charting every glyph',
        )
    parser.add_argument(
        '--chart',
        metavar='IMAGE',
        help='save a picture of all the glyphs (or of --text)',
        )
    parser.add_argument(
        '--preview',
        action='store_true',
        help='show the picture in a window',
        )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        )
    return parser


def run(args, stdout):
    if args.packed:
        font = PackedFont.read(args.input)
    else:
        font = repack(read_dump(args.input))
        log('packed %i glyphs', GLYPH_COUNT)
        if args.output:
            try:
                with open(args.output, 'wb') as f:
                    write_font(font, f)
            except OSError as err:
                raise FontConvError('unable to open %s: %s' % (args.output, err)) from err
        else:
            write_font(font, stdout)

    if args.show:
        print(glyph_chart(font, args.show), file=sys.stderr)

    if args.chart or args.preview:
        # Do not import this unless we need to, because pygame
        # prints a banner when imported.
        from .display import render_chart, save_picture, show_picture, text_surface
        if args.text is not None:
            picture = text_surface(font, args.text)
        else:
            picture = render_chart(font)
        if args.chart:
            save_picture(picture, args.chart)
        if args.preview:
            show_picture(picture)

    return font


def main(argv=None, stdout=None):
    parser = make_arg_parser()
    args = parser.parse_args(argv)
    if args.packed and args.output:
        parser.error('--output cannot be used with --packed')
    set_verbose(args.verbose)
    if stdout is None:
        stdout = sys.stdout.buffer
    try:
        run(args, stdout)
    except MemoryError:
        print('fontconv: out of memory', file=sys.stderr)
        return 1
    except FontConvError as err:
        print('fontconv: %s' % (err,), file=sys.stderr)
        return 1
    finally:
        if args.input is not sys.stdin.buffer:
            args.input.close()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
