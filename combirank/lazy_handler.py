import os
import sys
import glob
import logging
import tempfile
from logging.handlers import RotatingFileHandler

logger = logging.getLogger(__name__)


class LazyRotatingFileHandler(RotatingFileHandler):
    """
    RotatingFileHandler that keeps its log in a private temp directory chosen
    by prefix (reused across runs when still safe), and only creates the file
    on the first record.
    """

    def __init__(self, tmpdir_prefix='', basename=None, *args, **kwargs):
        self.log_dir = self._create_temp_dir(tmpdir_prefix)
        if basename is None:
            basename = f"log_{os.getpid()}.log"
        kwargs['filename'] = os.path.join(self.log_dir, basename)
        kwargs.setdefault('delay', True)
        super().__init__(*args, **kwargs)

    @staticmethod
    def _tmpdir_usable(path):
        st = os.stat(path)
        if st.st_uid != os.getuid() or (st.st_mode & 0o777) != 0o700:
            return False
        for item in os.listdir(path):
            if os.path.islink(os.path.join(path, item)):
                return False
        logger.debug(f"_tmpdir_usable: reusing {path}")
        return True

    @classmethod
    def _create_temp_dir(cls, tmpdir_prefix):
        existing_dirs = []
        if tmpdir_prefix:
            existing_dirs.extend(sorted(glob.glob(os.path.join(tempfile.gettempdir(), f"{tmpdir_prefix}*"))))

        for dir_ in existing_dirs:
            if os.path.isdir(dir_) and cls._tmpdir_usable(dir_):
                return dir_

        # mkdtemp creates the directory 0o700
        base_dir = tempfile.mkdtemp(prefix=tmpdir_prefix)
        logger.debug(f"_create_temp_dir: created {base_dir}")
        return base_dir


def setup_logger(prefix='combirank', name='combirank', level=logging.WARNING, stream=True,
                 max_bytes=10 * (1024 ** 2), backup_count=3):
    '''Attach a lazy rotating file handler (and optionally stderr) to the named logger'''
    log = logging.getLogger(name)
    log.setLevel(level)

    if not any(isinstance(h, LazyRotatingFileHandler) for h in log.handlers):
        handler = LazyRotatingFileHandler(tmpdir_prefix=prefix + '.', maxBytes=max_bytes,
                                          backupCount=backup_count)
        handler.setFormatter(logging.Formatter('%(asctime)s %(name)s %(levelname)s: %(message)s'))
        log.addHandler(handler)

    if stream and not any(type(h) is logging.StreamHandler for h in log.handlers):
        log.addHandler(logging.StreamHandler(sys.stderr))

    return log
