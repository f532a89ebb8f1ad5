"""Usage text shown when a test program is started without a mode."""


def usage_text(program: str) -> str:
    """Build the usage text for a test program.

    Args:
        program: Name the program was invoked with.

    Returns:
        Multi-line usage text, without trailing newline.
    """
    return f"""Syntax:
\t'{program} --desc' will display a description of the tests
\t'{program} --exec' will execute all the tests
\t'{program} --exec {{ <test-name-1> <test-name-2> ... }}' will execute the tests defined between '{{' and '}}'
\t'{program}' displays this message

For the programmers:
\t1 - Tests should write their messages to stderr
\t2 - If you do not want the stderr messages to be displayed, use
\t'{program} --exec 2> /dev/null' to execute the tests

Output:
\tIf the test passes, the message "<name> SUCCESS" will be printed
\tIf the test does not pass, the message "<name> FAIL" will be printed
\tIf an error occurs while executing the test, the message "ERROR for <name> '<message>'" will be printed
\tIf an exception occurs, the message "EXCEPTION '<message>'" will be printed"""
