import os
import sys
import tempfile
import unittest
from unittest.mock import patch
from xml.etree import ElementTree as ET

import yaml

from podcast_feed.cli import main

CONFIG_FILE = os.path.join(
    os.path.dirname(__file__), "..", "feed_config.example.yaml"
)
VALID_CONFIG = {
    "metadata": {"title": "Show", "link": "http://x/feed", "description": "desc"},
    "items": [],
}


class TestCLI(unittest.TestCase):
    @patch('podcast_feed.cli.read_feed_config')
    @patch('podcast_feed.cli.write_xml')
    @patch('podcast_feed.cli.probe_enclosures')
    @patch('sys.stdout')
    def test_main_with_default_args(self, mock_stdout, mock_probe, mock_write, mock_read_config):
        """Test the CLI with default arguments."""
        mock_read_config.return_value = VALID_CONFIG

        with patch.object(sys, 'argv', ['podcast-feed']), patch.dict(os.environ, {}, clear=True):
            main()

        mock_read_config.assert_called_once_with("feed_config.yaml")
        mock_probe.assert_called_once()
        document, path = mock_write.call_args[0]
        self.assertEqual(document.channel.title, "Show")
        self.assertEqual(path, "podcast_feed.xml")

    @patch('podcast_feed.cli.read_feed_config')
    @patch('podcast_feed.cli.write_xml')
    @patch('podcast_feed.cli.probe_enclosures')
    @patch('sys.stdout')
    def test_main_with_custom_args(self, mock_stdout, mock_probe, mock_write, mock_read_config):
        """Test the CLI with custom arguments."""
        mock_read_config.return_value = VALID_CONFIG

        argv = [
            'podcast-feed',
            '--input-file', 'custom.yaml',
            '--output-file', 'custom.xml',
            '--skip-asset-verification',
        ]
        with patch.object(sys, 'argv', argv):
            main()

        mock_read_config.assert_called_once_with("custom.yaml")
        mock_probe.assert_not_called()
        self.assertEqual(mock_write.call_args[0][1], "custom.xml")

    @patch('podcast_feed.__version__', '0.1.0')
    @patch('sys.stdout')
    @patch('sys.exit', side_effect=SystemExit)
    def test_version_flag(self, mock_exit, mock_stdout):
        """Test the --version flag."""
        with patch.object(sys, 'argv', ['podcast-feed', '--version']):
            with self.assertRaises(SystemExit):
                main()

        mock_exit.assert_called_once_with(0)

    @patch('podcast_feed.cli.read_feed_config')
    @patch('podcast_feed.cli.write_xml')
    @patch('sys.stdout')
    @patch('sys.exit', side_effect=SystemExit)
    def test_dry_run(self, mock_exit, mock_stdout, mock_write, mock_read_config):
        """Test that --dry-run validates without writing."""
        mock_read_config.return_value = VALID_CONFIG

        with patch.object(sys, 'argv', ['podcast-feed', '--dry-run']):
            with self.assertRaises(SystemExit):
                main()

        mock_exit.assert_called_once_with(0)
        mock_write.assert_not_called()

    @patch('podcast_feed.cli.read_feed_config')
    @patch('podcast_feed.cli.write_xml')
    @patch('sys.stdout')
    @patch('sys.exit', side_effect=SystemExit)
    def test_dry_run_from_environment(self, mock_exit, mock_stdout, mock_write, mock_read_config):
        """Test the GitHub Actions dry-run input."""
        mock_read_config.return_value = VALID_CONFIG

        with patch.object(sys, 'argv', ['podcast-feed']), patch.dict(os.environ, {"INPUT_DRY_RUN": "true"}):
            with self.assertRaises(SystemExit):
                main()

        mock_exit.assert_called_once_with(0)
        mock_write.assert_not_called()

    @patch('podcast_feed.cli.read_feed_config')
    @patch('sys.stderr')
    @patch('sys.stdout')
    @patch('sys.exit', side_effect=SystemExit)
    def test_missing_file(self, mock_exit, mock_stdout, mock_stderr, mock_read_config):
        """Test error handling for a missing config file."""
        mock_read_config.side_effect = FileNotFoundError("feed_config.yaml")

        with patch.object(sys, 'argv', ['podcast-feed']):
            with self.assertRaises(SystemExit):
                main()

        mock_exit.assert_called_once_with(1)

    @patch('podcast_feed.cli.read_feed_config')
    @patch('sys.stderr')
    @patch('sys.stdout')
    @patch('sys.exit', side_effect=SystemExit)
    def test_invalid_yaml(self, mock_exit, mock_stdout, mock_stderr, mock_read_config):
        """Test error handling for broken YAML."""
        mock_read_config.side_effect = yaml.YAMLError("bad indent")

        with patch.object(sys, 'argv', ['podcast-feed']):
            with self.assertRaises(SystemExit):
                main()

        mock_exit.assert_called_once_with(1)

    @patch('podcast_feed.cli.read_feed_config')
    @patch('podcast_feed.cli.write_xml')
    @patch('sys.stderr')
    @patch('sys.stdout')
    @patch('sys.exit', side_effect=SystemExit)
    def test_validation_errors(self, mock_exit, mock_stdout, mock_stderr, mock_write, mock_read_config):
        """Test that an invalid config is rejected."""
        mock_read_config.return_value = {"items": []}

        with patch.object(sys, 'argv', ['podcast-feed']):
            with self.assertRaises(SystemExit):
                main()

        mock_exit.assert_called_once_with(1)
        mock_write.assert_not_called()

    @patch('sys.stdout')
    def test_end_to_end(self, mock_stdout):
        """Test generating a feed from the example config."""
        with tempfile.TemporaryDirectory() as tmp:
            output = os.path.join(tmp, "podcast_feed.xml")
            argv = [
                'podcast-feed',
                '--input-file', CONFIG_FILE,
                '--output-file', output,
                '--skip-asset-verification',
            ]
            with patch.object(sys, 'argv', argv):
                main()

            channel = ET.parse(output).getroot().find("channel")
            self.assertEqual(channel.find("title").text, "My Podcast")
            self.assertEqual(len(channel.findall("item")), 2)


if __name__ == "__main__":
    unittest.main()
