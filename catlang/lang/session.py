"""Session control for the cat language: runs statements against a single top-level environment, either in
command-line mode or file interpretation mode.
"""

from catlang.env import Env
from catlang.interpreter import parse
from catlang.lang.error import GenericException
from catlang.val import Unit


class Session:
    """Governs a catlang session. Every statement of the session is evaluated against self.env, which lives as long as
    the session does.
    """
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path=SH_FILE, cmd_line=True):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.env = Env()
        self.to_exec = {}  # dict of line num: (expr, Parse) to evaluate

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r", encoding="utf-8") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for expr, line_num in exprs:
                self.add(expr, line_num)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename", diagnosis=False)

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. A statement continues on the next line as long as it has
        more opening than closing braces, in which case the returned add_to_prev is True. In command-line mode, exprs
        can be ignored (it keeps track of a file's statements).
        """
        line = line.strip()

        if exprs is not None:
            if add_to_prev and exprs:
                prev, prev_line_num = exprs.pop()
                line = f"{prev}\n{line}"
                line_num = prev_line_num
            if line:
                exprs.append((line, line_num))

        return line, line.count("{") > line.count("}")

    def add(self, expr, line_num):
        """Parses expr and adds it to the current session. Evaluation is delayed until run is called."""
        self._register_line(expr, line_num)  # in case error is raised
        self.to_exec[line_num] = (expr, parse(expr))
        self._remove_line()

    def run(self):
        """Evaluates this session's pending statements in order, yielding every result that isn't Unit. Will raise any
        errors that are encountered.
        """
        for line_num, (expr, parsed) in list(self.to_exec.items()):
            self._register_line(expr, line_num)

            try:
                val = parsed.eval(self.env)
            finally:
                del self.to_exec[line_num]

            self._remove_line()

            if not isinstance(val, Unit):
                yield val

    def _register_line(self, line, line_num):
        # the shell echoes nothing back, so only file sessions report where an error happened
        if not self.cmd_line:
            self.error_handler.register_line(self.path, line, line_num)

    def _remove_line(self):
        if not self.cmd_line:
            self.error_handler.remove_line(self.path)
