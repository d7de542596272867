# Fixed names and sizes used across the collector.
LOG_FILE_NAME = "console-log.txt"
PDF_EXTENSION = ".pdf"

COPY_STRATEGIES = ("stream", "whole")
DEFAULT_COPY_STRATEGY = "stream"
COPY_CHUNK_SIZE = 1024 * 1024  # 1 MiB per read for streamed copies

PREVIEW_LIMIT = 30
