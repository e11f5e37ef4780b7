"""Handles interactive/command-line mode for the catlang interpreter. Uses cmd as backend."""

import cmd

from catlang.lang.session import Session


class Shell(cmd.Cmd):
    """Cat language interpreter shell."""
    intro = "Cat language interpreter :: Python backend\nType 'help' for more information."
    prompt = "-> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "-> "      # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_lines = []
        self.line_num = 0

    def onecmd(self, line):
        """Names bound in the session take precedence over shell commands, except for EOF."""
        name, __, line = self.parseline(line)
        if name and name != "EOF" and (self.sess.env.has_binding(name) or self.sess.env.has_func(name)):
            return self.default(line)
        return super().onecmd(line)

    def default(self, line):
        """Parses and evaluates an arbitrary catlang statement, printing its value unless it is Unit."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            source, add_to_prev = Session.preprocess_line("\n".join(self._tmp_lines + [line]), self.line_num, False)

            if add_to_prev:
                self._tmp_lines.append(line)
                self.prompt = self.secondary_prompt
                return

            self._tmp_lines = []
            self.prompt = self._tmp_prompt

            if not source:
                return

            self.sess.add(source, self.line_num)
            for val in self.sess.run():
                print(val, file=self.stdout)

    def do_help(self, arg):
        """Doesn't return docs, but rather a short intro."""
        print("Welcome to the catlang interpreter!\n\n"
              "Numbers can be added (+), subtracted (-), multiplied (*) and divided (/), and\n"
              "'a | b' tells whether a is divisible by b. Only one operator is allowed per\n"
              "expression; use blocks to nest them: '{ 1 + 2 } * 3'.\n\n"
              "Try binding a value with 'let x = 10', then typing 'x * 2'. Functions are\n"
              "defined with 'fn add a b => a + b' and called with 'add 1 2'. A block\n"
              "'{ let y = 1  y + 1 }' has its own scope, and an unfinished block continues on\n"
              "the next line. Defining 'help' or 'exit' yourself hides the command of that name.",
              file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        if self._tmp_lines:
            return self.default("")
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
