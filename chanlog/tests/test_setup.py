"""Tests for the process-wide registry helpers."""
from __future__ import annotations

import json
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from chanlog.core.logger import ChannelConfig, LoggingRegistry
from chanlog.core.logger import setup as logger_setup


class TestProcessRegistry(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.ambient = logging.getLogger("chanlog.tests.setup.ambient")
        self.ambient.propagate = False
        logger_setup._registry = None

    def tearDown(self) -> None:
        logger_setup.close()
        logger_setup._registry = None
        self.ambient.handlers.clear()
        self._tmp.cleanup()

    def test_configure_loads_channels(self) -> None:
        path = os.path.join(self._tmp.name, "def.log")
        registry = logger_setup.configure(
            {"default": ChannelConfig(path=path)}, ambient=self.ambient,
        )
        self.assertIsInstance(registry, LoggingRegistry)
        self.assertIs(logger_setup.get_registry(), registry)
        self.assertIn("default", registry)
        self.assertIs(logger_setup.channel("gin"), logger_setup.default())
        logger_setup.channel("gin").info("log by channel gin")
        with open(path, encoding="utf-8") as fh:
            self.assertEqual(json.loads(fh.read())["msg"], "log by channel gin")

    def test_reconfigure_shuts_down_previous(self) -> None:
        first = logger_setup.configure(
            {"default": ChannelConfig(path=os.path.join(self._tmp.name, "a.log"))},
            ambient=self.ambient,
        )
        old_output = first.default().output
        logger_setup.configure(
            {"default": ChannelConfig(path=os.path.join(self._tmp.name, "b.log"))},
            ambient=self.ambient,
        )
        self.assertTrue(old_output.closed)
        self.assertEqual(len(self.ambient.handlers), 1)

    def test_reload_rebuilds(self) -> None:
        logger_setup.configure(
            {"default": ChannelConfig(path=os.path.join(self._tmp.name, "def.log"))},
            ambient=self.ambient,
        )
        before = logger_setup.default()
        logger_setup.reload()
        self.assertIsNot(logger_setup.default(), before)

    def test_get_registry_from_env_without_path(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            registry = logger_setup.get_registry()
        self.assertEqual(registry.configs, {})
        self.assertIs(logger_setup.default(), logging.getLogger())

    def test_configure_from_env(self) -> None:
        path = os.path.join(self._tmp.name, "env", "app.log")
        with patch.dict("os.environ", {"LOG_PATH": path, "LOG_LEVEL": "debug"}, clear=True):
            registry = logger_setup.configure(ambient=self.ambient)
        self.assertEqual(registry.configs["default"].path, path)
        self.assertTrue(os.path.exists(path))

    def test_close_without_registry(self) -> None:
        logger_setup.close()
        self.assertIsNone(logger_setup._registry)
