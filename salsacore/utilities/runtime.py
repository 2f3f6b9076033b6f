import logging


def _hex_word(word: int) -> str:
    return f'{word:08x}'


class RuntimeConfiguration(object):
    """
    Global, mutable display and diagnostics settings. Nothing here alters cipher output.
    """

    def __init__(self):
        self.show_progress = False
        self.trace_styles  = ["dim white", "green", "magenta", "yellow", "cyan"]
        self.word_printer  = _hex_word


    def __repr__(self):
        return f"<RuntimeConfiguration: show_progress={self.show_progress}, log_level={logging.getLevelName(self.log_level)}>"


    @property
    def log_level(self) -> int:
        return logging.getLogger('salsacore').level


    def set_log_level(self, level: int):
        """
        Sets the level of the package logger.

        Parameters:
            level (int): A `logging` level (e.g. `logging.DEBUG`).
        """
        logging.getLogger('salsacore').setLevel(level)


RUNTIME = RuntimeConfiguration()
