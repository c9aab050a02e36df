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
import io
import os
import shutil
import tempfile
import unittest

from mock import patch

from fontconv.__main__ import main, make_arg_parser
from fontconv.layout import INPUT_SIZE, OUTPUT_SIZE


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.dump = os.path.join(self.dir, 'font.raw')
        data = bytearray(b'\xff' * INPUT_SIZE)
        data[3] = 0
        with open(self.dump, 'wb') as f:
            f.write(data)

    def tearDown(self):
        shutil.rmtree(self.dir)

    def test_no_arguments_is_stdin_to_stdout(self):
        with patch('sys.stdin') as stdin:
            args = make_arg_parser().parse_args([])
        self.assertIs(args.input, stdin.buffer)
        self.assertIsNone(args.output)
        self.assertFalse(args.packed)

    def test_convert_to_stdout(self):
        out = io.BytesIO()
        with open(self.dump, 'rb') as f, patch('sys.stdin') as stdin:
            stdin.buffer = f
            self.assertEqual(main([], stdout=out), 0)
        font = out.getvalue()
        self.assertEqual(len(font), OUTPUT_SIZE)
        self.assertEqual(font[0], 0x08)
        self.assertFalse(any(font[1:]))

    def test_convert_to_file(self):
        packed = os.path.join(self.dir, 'font.bin')
        self.assertEqual(main(['-i', self.dump, '-o', packed]), 0)
        with open(packed, 'rb') as f:
            font = f.read()
        self.assertEqual(len(font), OUTPUT_SIZE)
        self.assertEqual(font[0], 0x08)

    def test_truncated_input(self):
        short = os.path.join(self.dir, 'short.raw')
        with open(short, 'wb') as f:
            f.write(bytes(100))
        out = io.BytesIO()
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main(['-i', short], stdout=out), 1)
        self.assertIn('truncated input', err.getvalue())
        self.assertEqual(out.getvalue(), b'')

    def test_out_of_memory(self):
        out = io.BytesIO()
        with patch('fontconv.__main__.repack', side_effect=MemoryError), \
             patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main(['-i', self.dump], stdout=out), 1)
        self.assertIn('out of memory', err.getvalue())

    def test_show(self):
        out = io.BytesIO()
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main(['-i', self.dump, '--show', '0'], stdout=out), 0)
        self.assertIn('   @    ', err.getvalue())

    def test_show_bad_glyph(self):
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                main(['-i', self.dump, '--show', '256'])
        self.assertEqual(cm.exception.code, 2)

    def test_packed_input(self):
        packed = os.path.join(self.dir, 'font.bin')
        main(['-i', self.dump, '-o', packed])
        out = io.BytesIO()
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main(['--packed', '-i', packed, '--show', '0x0'], stdout=out), 0)
        self.assertEqual(out.getvalue(), b'')
        self.assertIn('   @    ', err.getvalue())

    def test_chart(self):
        import pygame
        chart = os.path.join(self.dir, 'chart.bmp')
        self.assertEqual(main(['-i', self.dump, '--chart', chart], stdout=io.BytesIO()), 0)
        self.assertEqual(pygame.image.load(chart).get_size(), (64 * 9 + 1, 4 * 17 + 1))

    def test_text_picture(self):
        import pygame
        picture = os.path.join(self.dir, 'text.bmp')
        argv = ['-i', self.dump, '--text', 'hello', '--chart', picture]
        self.assertEqual(main(argv, stdout=io.BytesIO()), 0)
        self.assertEqual(pygame.image.load(picture).get_size(), (80 * 8, 30 * 16))

    def test_chart_save_error(self):
        import pygame
        chart = os.path.join(self.dir, 'chart.bmp')
        with patch('pygame.image.save', side_effect=pygame.error('boom')), \
             patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main(['-i', self.dump, '--chart', chart], stdout=io.BytesIO()), 1)
        self.assertIn('unable to save', err.getvalue())

    def test_failed_run_leaves_output_file_alone(self):
        short = os.path.join(self.dir, 'short.raw')
        with open(short, 'wb') as f:
            f.write(bytes(100))
        packed = os.path.join(self.dir, 'font.bin')
        with open(packed, 'wb') as f:
            f.write(b'\x5a' * OUTPUT_SIZE)
        with patch('sys.stderr', new_callable=io.StringIO):
            self.assertEqual(main(['-i', short, '-o', packed]), 1)
        with open(packed, 'rb') as f:
            self.assertEqual(f.read(), b'\x5a' * OUTPUT_SIZE)

    def test_packed_rejects_output(self):
        packed = os.path.join(self.dir, 'font.bin')
        main(['-i', self.dump, '-o', packed])
        with open(packed, 'rb') as f:
            before = f.read()
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                main(['--packed', '-i', packed, '-o', packed, '--show', '0'])
        self.assertEqual(cm.exception.code, 2)
        with open(packed, 'rb') as f:
            self.assertEqual(f.read(), before)
        self.assertEqual(len(before), OUTPUT_SIZE)

    def test_unwritable_output(self):
        packed = os.path.join(self.dir, 'missing', 'font.bin')
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main(['-i', self.dump, '-o', packed]), 1)
        self.assertIn('unable to open', err.getvalue())


if __name__ == '__main__':
    unittest.main()
