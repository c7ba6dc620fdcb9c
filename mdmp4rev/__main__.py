import sys

from mdmp4rev.cli import main
from mdmp4rev.core.config.settings import settings

# sys.argv[0] is the path of this file under -m; report the program name instead
sys.exit(main([settings.PROGRAM_NAME, *sys.argv[1:]]))
