import os
import tempfile

# keep test runs out of ~/.ibanCheck; must happen before utils.logger is imported
os.environ.setdefault("IBANCHECK_LOG_DIR", tempfile.mkdtemp(prefix="ibancheck-logs-"))
