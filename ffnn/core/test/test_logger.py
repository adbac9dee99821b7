import logging
import os
import shutil
import tempfile
import unittest

from ffnn.core.logger import TrainingLogger, log_progress
from ffnn.core.network import Network, TrainItem


class RecordingHandler(logging.Handler):

    def __init__(self):
        super(RecordingHandler, self).__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_log_progress_format(self):
        logger = logging.getLogger('test-log-progress')
        logger.setLevel(logging.INFO)
        handler = RecordingHandler()
        logger.addHandler(handler)

        log_progress(logger, "training steps", 42, 1000)

        logger.removeHandler(handler)
        self.assertEqual(handler.messages, ["(0042 / 1000) training steps"])

    def test_training_logger_writes_file(self):
        filename = os.path.join(self.tmpdir, 'log.txt')
        logger = TrainingLogger(filename=filename, stdout=False)

        logger.progress("done", 3, 10)
        logger.close()

        with open(filename) as f:
            contents = f.read()

        self.assertIn("INFO", contents)
        self.assertIn("(03 / 10) done", contents)

    def test_network_logs_progress(self):
        logger = TrainingLogger(stdout=False)
        handler = RecordingHandler()
        logger.addHandler(handler)

        net = Network(2, 2, 1, random_state=123, logger=logger,
                      log_interval=5)
        net.train([TrainItem([1., 0.], [1.])], 10)
        logger.close()

        progress = [m for m in handler.messages if m.startswith('(')]
        self.assertEqual(progress, ["(05 / 10) training steps",
                                    "(10 / 10) training steps"])


if __name__ == '__main__':
    unittest.main()
