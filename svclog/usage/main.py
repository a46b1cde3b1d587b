import argparse

import svclog
from svclog import Severity

# Register --syslog, --logfile and --loglevel on the host's parser
parser = argparse.ArgumentParser()
svclog.init("myapp", Severity.WARNING, "", parser=parser)
parser.parse_args()

svclog.infof("starting")  # filtered out at WARNING
svclog.warnf("disk at %d%%", 91)
svclog.error(RuntimeError("connection lost"))
