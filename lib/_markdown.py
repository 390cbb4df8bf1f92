# Markdown documentation for instruction keywords and the escape directive.

import logging
import os
import os.path

import _dockhover as _dockhover


## Constants ##

logger = logging.getLogger(__name__)

# Built-in documentation, keyed by canonical name: upper-case keywords and the
# lower-case directive name.
DOCS = {
   "ADD":
      "Copy new files, directories or remote file URLs from `<src>` and add "
      "them to the filesystem of the image at the path `<dest>`.\n\n"
      "    ADD hom* /mydir/",
   "ARG":
      "Define a variable with an optional default value that users can pass "
      "at build-time with `docker build --build-arg <varname>=<value>`.\n\n"
      "    ARG userName\n    ARG testOutputDir=test",
   "CMD":
      "Provide defaults for an executing container. If an executable is not "
      "specified, then `ENTRYPOINT` must be specified as well. There can only "
      "be one `CMD` instruction in a Dockerfile.\n\n"
      "    CMD [ \"/bin/ls\", \"-l\" ]",
   "COPY":
      "Copy new files or directories from `<src>` and add them to the "
      "filesystem of the image at the path `<dest>`.\n\n"
      "    COPY hom* /mydir/",
   "ENTRYPOINT":
      "Configure the container to be run as an executable.\n\n"
      "    ENTRYPOINT [\"/opt/app/run.sh\", \"--port\", \"8080\"]",
   "ENV":
      "Set the environment variable `<key>` to the value `<value>`.\n\n"
      "    ENV buildTag=1.0",
   "EXPOSE":
      "Define the network ports that this container will listen on at "
      "runtime.\n\n"
      "    EXPOSE 8080\n    EXPOSE 80 443 22\n    EXPOSE 7000-8000",
   "FROM":
      "Set the base image to use for any subsequent instructions that "
      "follow.\n\n"
      "    FROM ubuntu:18.04",
   "HEALTHCHECK":
      "Define how Docker should test the container to check that it is "
      "still working. Alternatively, disable the base image's "
      "`HEALTHCHECK` instruction. There can only be one `HEALTHCHECK` "
      "instruction in a Dockerfile.\n\n"
      "    HEALTHCHECK --interval=10m --timeout=5s \\\n"
      "        CMD curl -f http://localhost/ || exit 1\n"
      "    HEALTHCHECK NONE",
   "LABEL":
      "Add metadata to an image.\n\n"
      "    LABEL version=\"1.0\"",
   "MAINTAINER":
      "Set the _Author_ field of the generated images. This instruction has "
      "been deprecated in favor of `LABEL`.\n\n"
      "    MAINTAINER name",
   "ONBUILD":
      "Add a trigger instruction to an image. The instruction will be "
      "executed when the image is used as the base of another build.\n\n"
      "    ONBUILD ADD . /opt/app/src/extensions/",
   "RUN":
      "Execute any commands on top of the current image as a new layer and "
      "commit the results.\n\n"
      "    RUN apt-get update && apt-get install -y curl",
   "SHELL":
      "Override the default shell used for the shell form of commands.\n\n"
      "    SHELL [\"powershell\", \"-command\"]",
   "STOPSIGNAL":
      "Set the system call signal to use to send to the container to exit. "
      "Signals can be valid unsigned numbers or a signal name in the "
      "`SIGNAME` format such as `SIGKILL`.\n\n"
      "    STOPSIGNAL 9",
   "USER":
      "Set the user name or UID to use when running the image in addition to "
      "any subsequent `CMD`, `ENTRYPOINT`, or `RUN` instructions that "
      "follow it in the Dockerfile.\n\n"
      "    USER daemon",
   "VOLUME":
      "Create a mount point with the specified name and mark it as holding "
      "externally mounted volumes from the native host or from other "
      "containers.\n\n"
      "    VOLUME [\"/data\"]",
   "WORKDIR":
      "Set the working directory for any subsequent `ADD`, `COPY`, `CMD`, "
      "`ENTRYPOINT`, or `RUN` instructions that follow it in the "
      "Dockerfile.\n\n"
      "    WORKDIR /path/to/workdir",
   _dockhover.DIRECTIVE_ESCAPE:
      "Set the character used to escape characters and newlines in this "
      "Dockerfile. If unspecified, the default escape character is `\\`.\n\n"
      "    #escape=`",
}


## Classes ##

class Markdown_Documentation:
   """Documentation source for hover.

      Constructor arguments:

        docs_dir .. Directory of NAME.md files that override the built-in
                    text, e.g. FROM.md or escape.md. If None, use
                    $DOCKHOVER_DOCS_DIR if set."""

   __slots__ = ("docs",)

   def __init__(self, docs_dir=None):
      self.docs = dict(DOCS)
      if (docs_dir is None):
         docs_dir = _dockhover.DOCS_DIR
      if (docs_dir is not None):
         self.load(docs_dir)

   def get_markdown(self, name):
      "Return documentation for canonical name, or None if there is none."
      return self.docs.get(name)

   def load(self, docs_dir):
      if (not os.path.isdir(docs_dir)):
         logger.warning("documentation directory not found, ignored: %s"
                        % docs_dir)
         return
      for filename in sorted(os.listdir(docs_dir)):
         (name, ext) = os.path.splitext(filename)
         if (ext != ".md"):
            continue
         if (name.upper() in _dockhover.KEYWORDS):
            name = name.upper()
         elif (name.lower() == _dockhover.DIRECTIVE_ESCAPE):
            name = name.lower()
         else:
            logger.warning("not a keyword or directive, ignored: %s"
                           % filename)
            continue
         path = os.path.join(docs_dir, filename)
         with open(path, "rt", encoding="utf-8") as fp:
            self.docs[name] = fp.read()
         logger.info("loaded documentation: %s" % path)
