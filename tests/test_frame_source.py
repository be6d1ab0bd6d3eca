"""
Tests for frame_source – VideoSource over a scripted cv2.VideoCapture.

cv2.VideoCapture is replaced by FakeCapture so no real codec is needed;
the cv2 property constants stay real.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

import cv2
import numpy as np

from framestep.core.models import ADVANCE_ONE, NO_EFFECT, TERMINATE, Effect
from framestep.errors import InitialReadFailure, NavigationFailure, OpenFailure
from framestep.frame_source import VideoSource


def _frames(count, size=(4, 6)):
    h, w = size
    return [np.full((h, w, 3), i, dtype=np.uint8) for i in range(count)]


class FakeCapture:
    """Minimal stand-in for cv2.VideoCapture with a decoder position."""

    def __init__(self, frames, fps=25.0, reported=None, opened=True, bad=()):
        self.frames = frames
        self.fps = fps
        self.reported = len(frames) if reported is None else reported
        self.opened = opened
        self.bad = set(bad)
        self.pos = 0
        self.sets = []
        self.released = False

    def isOpened(self):
        return self.opened

    def get(self, prop):
        if prop == cv2.CAP_PROP_FRAME_COUNT:
            return float(self.reported)
        if prop == cv2.CAP_PROP_FPS:
            return self.fps
        if prop == cv2.CAP_PROP_FRAME_WIDTH:
            return float(self.frames[0].shape[1]) if self.frames else 0.0
        if prop == cv2.CAP_PROP_FRAME_HEIGHT:
            return float(self.frames[0].shape[0]) if self.frames else 0.0
        if prop == cv2.CAP_PROP_POS_FRAMES:
            return float(self.pos)
        return 0.0

    def set(self, prop, value):
        if prop == cv2.CAP_PROP_POS_FRAMES:
            self.sets.append(int(value))
            self.pos = int(value)
        return True

    def read(self):
        index = self.pos
        self.pos += 1
        if index >= len(self.frames) or index in self.bad:
            return False, None
        return True, self.frames[index]

    def release(self):
        self.released = True


class _SourceTestCase(unittest.TestCase):

    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix='.mp4')
        os.close(fd)

    def tearDown(self):
        os.unlink(self.path)

    def _open(self, cap):
        source = VideoSource()
        with patch('framestep.frame_source.cv2.VideoCapture', return_value=cap):
            info = source.open(self.path)
        return source, info


class TestOpen(_SourceTestCase):

    def test_missing_file(self):
        with self.assertRaises(OpenFailure):
            VideoSource().open('/nonexistent/clip.mp4')

    def test_empty_path(self):
        with self.assertRaises(OpenFailure):
            VideoSource().open('')

    def test_capture_not_opened(self):
        cap = FakeCapture(_frames(3), opened=False)
        with self.assertRaises(OpenFailure):
            self._open(cap)
        self.assertTrue(cap.released)

    def test_no_frames_reported(self):
        cap = FakeCapture(_frames(3), reported=0)
        with self.assertRaises(OpenFailure) as ctx:
            self._open(cap)
        self.assertIn('no frames', str(ctx.exception))
        self.assertTrue(cap.released)

    def test_first_frame_unreadable(self):
        cap = FakeCapture(_frames(3), bad={0})
        with self.assertRaises(InitialReadFailure):
            self._open(cap)
        self.assertTrue(cap.released)

    def test_open_reports_info(self):
        source, info = self._open(FakeCapture(_frames(5), fps=24.0))
        self.assertEqual(info.total_frames, 5)
        self.assertEqual(info.fps, 24.0)
        self.assertEqual((info.width, info.height), (6, 4))
        self.assertEqual(info.path, self.path)
        self.assertIs(source.info, info)

    def test_open_holds_first_frame(self):
        source, _ = self._open(FakeCapture(_frames(5)))
        self.assertTrue(source.is_open)
        self.assertEqual(source.position, 0)
        self.assertEqual(int(source.current_image[0, 0, 0]), 0)

    def test_zero_fps_uses_default(self):
        _, info = self._open(FakeCapture(_frames(2), fps=0.0))
        self.assertEqual(info.fps, 30.0)

    def test_broken_fps_uses_configured_default(self):
        for fps in (float('nan'), float('inf'), -25.0, 0.0):
            source = VideoSource(default_fps=10.0)
            with patch('framestep.frame_source.cv2.VideoCapture',
                       return_value=FakeCapture(_frames(2), fps=fps)):
                info = source.open(self.path)
            self.assertEqual(info.fps, 10.0, msg=fps)
            self.assertEqual(info.frame_interval_ms, 100, msg=fps)

    def test_path_not_on_disk_is_left_to_opencv(self):
        cap = FakeCapture(_frames(3))
        with patch('framestep.frame_source.cv2.VideoCapture', return_value=cap) as ctor:
            info = VideoSource().open('frames/img_%03d.png')
        ctor.assert_called_once_with('frames/img_%03d.png')
        self.assertEqual(info.total_frames, 3)

    def test_unopenable_path(self):
        cap = FakeCapture(_frames(3), opened=False)
        with patch('framestep.frame_source.cv2.VideoCapture', return_value=cap):
            with self.assertRaises(OpenFailure) as ctx:
                VideoSource().open('rtsp://camera.invalid/stream')
        self.assertIn('cannot open video file', str(ctx.exception))


class TestNavigation(_SourceTestCase):

    def test_read_next_is_sequential(self):
        cap = FakeCapture(_frames(5))
        source, _ = self._open(cap)
        for expected in (1, 2, 3):
            frame = source.read_next_frame()
            self.assertEqual(int(frame[0, 0, 0]), expected)
        self.assertEqual(source.position, 3)
        self.assertEqual(cap.sets, [])

    def test_seek_to_index(self):
        cap = FakeCapture(_frames(5))
        source, _ = self._open(cap)
        frame = source.seek_to_index(3)
        self.assertEqual(int(frame[0, 0, 0]), 3)
        self.assertEqual(cap.sets, [3])
        self.assertEqual(source.position, 3)

    def test_read_after_seek_continues(self):
        source, _ = self._open(FakeCapture(_frames(5)))
        source.seek_to_index(1)
        self.assertEqual(int(source.read_next_frame()[0, 0, 0]), 2)

    def test_seek_out_of_range(self):
        source, _ = self._open(FakeCapture(_frames(5)))
        for index in (-1, 5):
            with self.assertRaises(NavigationFailure) as ctx:
                source.seek_to_index(index)
            self.assertEqual(ctx.exception.index, index)
        self.assertEqual(source.position, 0)

    def test_read_past_end_keeps_last_frame(self):
        source, _ = self._open(FakeCapture(_frames(2)))
        source.read_next_frame()
        with self.assertRaises(NavigationFailure) as ctx:
            source.read_next_frame()
        self.assertEqual(ctx.exception.index, 2)
        self.assertEqual(source.position, 1)
        self.assertEqual(int(source.current_image[0, 0, 0]), 1)

    def test_failed_read_resyncs_next_time(self):
        cap = FakeCapture(_frames(5), bad={2})
        source, _ = self._open(cap)
        source.read_next_frame()
        with self.assertRaises(NavigationFailure):
            source.read_next_frame()
        cap.bad.clear()
        frame = source.read_next_frame()
        self.assertEqual(cap.sets, [2])
        self.assertEqual(int(frame[0, 0, 0]), 2)
        self.assertEqual(source.position, 2)

    def test_failed_seek_keeps_image(self):
        cap = FakeCapture(_frames(5), bad={4})
        source, _ = self._open(cap)
        with self.assertRaises(NavigationFailure) as ctx:
            source.seek_to_index(4)
        self.assertEqual(ctx.exception.operation, 'seek')
        self.assertEqual(source.position, 0)
        self.assertEqual(int(source.current_image[0, 0, 0]), 0)

    def test_read_before_open(self):
        with self.assertRaises(RuntimeError):
            VideoSource().read_next_frame()


class TestApply(_SourceTestCase):

    def test_advance(self):
        source, _ = self._open(FakeCapture(_frames(3)))
        frame = source.apply(ADVANCE_ONE)
        self.assertEqual(int(frame[0, 0, 0]), 1)

    def test_seek(self):
        source, _ = self._open(FakeCapture(_frames(3)))
        frame = source.apply(Effect.seek_to(2))
        self.assertEqual(int(frame[0, 0, 0]), 2)

    def test_no_frame_effects(self):
        cap = FakeCapture(_frames(3))
        source, _ = self._open(cap)
        self.assertIsNone(source.apply(NO_EFFECT))
        self.assertIsNone(source.apply(TERMINATE))
        self.assertEqual(source.position, 0)


class TestClose(_SourceTestCase):

    def test_close_releases(self):
        cap = FakeCapture(_frames(3))
        source, _ = self._open(cap)
        source.close()
        self.assertTrue(cap.released)
        self.assertFalse(source.is_open)
        self.assertIsNone(source.current_image)
        self.assertEqual(source.position, -1)

    def test_context_manager(self):
        cap = FakeCapture(_frames(3))
        with VideoSource() as source:
            with patch('framestep.frame_source.cv2.VideoCapture', return_value=cap):
                source.open(self.path)
        self.assertTrue(cap.released)

    def test_reopen_releases_previous(self):
        first = FakeCapture(_frames(3))
        source, _ = self._open(first)
        with patch('framestep.frame_source.cv2.VideoCapture',
                   return_value=FakeCapture(_frames(2))):
            source.open(self.path)
        self.assertTrue(first.released)
        self.assertEqual(source.info.total_frames, 2)

    def test_close_without_open(self):
        VideoSource().close()


if __name__ == '__main__':
    unittest.main()
