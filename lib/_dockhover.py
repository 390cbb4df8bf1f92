# Shared constants and configuration for Dockerfile hover.

import logging
import os


## Constants ##

logger = logging.getLogger(__name__)

# Escape character in force until an escape directive says otherwise, and the
# only characters such a directive may select.
ESCAPE_DEFAULT = "\\"
ESCAPE_CHARS = ("\\", "`")

# The only parser directive we model. Lookups for its documentation use this
# lower-case name; instruction keywords are looked up upper-case.
DIRECTIVE_ESCAPE = "escape"

# Instruction keywords that have documentation.
KEYWORDS = frozenset({ "ADD", "ARG", "CMD", "COPY", "ENTRYPOINT", "ENV",
                       "EXPOSE", "FROM", "HEALTHCHECK", "LABEL", "MAINTAINER",
                       "ONBUILD", "RUN", "SHELL", "STOPSIGNAL", "USER",
                       "VOLUME", "WORKDIR" })

# Instructions whose arguments declare build variables.
KEYWORDS_DECLARING = frozenset({ "ARG", "ENV" })

# Default number of parsed documents kept around, keyed by text.
CACHE_SIZE_DEFAULT = 16

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


## Functions ##

def env_int(name, default):
   """Return environment variable name as an int, or default if it's unset.
      Garbage values are logged and replaced by the default."""
   text = os.getenv(name)
   if (text is None or text.strip() == ""):
      return default
   try:
      value = int(text)
   except ValueError:
      logger.warning("%s: not an integer, using %d: %s" % (name, default, text))
      return default
   if (value < 0):
      logger.warning("%s: negative, using %d: %d" % (name, default, value))
      return default
   return value

def log_init(verbose=0):
   """Configure the root logger for command-line use. Verbosity on the command
      line wins over $DOCKHOVER_LOG_LEVEL."""
   if (verbose >= 2):
      level = logging.DEBUG
   elif (verbose == 1):
      level = logging.INFO
   else:
      level = logging.getLevelName(LOG_LEVEL.upper())
      if (not isinstance(level, int)):
         level = logging.WARNING
   logging.basicConfig(level=level, format=LOG_FORMAT)


## Configuration ##

CACHE_SIZE = env_int("DOCKHOVER_CACHE_SIZE", CACHE_SIZE_DEFAULT)
DOCS_DIR = os.getenv("DOCKHOVER_DOCS_DIR")
LOG_LEVEL = os.getenv("DOCKHOVER_LOG_LEVEL", "WARNING")
