"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Any, Optional, Sequence, Union


class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class TreeBuildLog(Log):
    def __init__(self, num_symbols: int, depth: int) -> None:
        self.num_symbols = num_symbols
        self.depth = depth
        super().__init__("Tree_build_log", LogLevel.INFO, f"Leaves: {num_symbols}, Depth: {depth}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_bits: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_bits = encoded_bits
        super().__init__("Coding_log", LogLevel.INFO, f"Symbols: {symbol_count}, Encoded bits: {encoded_bits}")


class EncodedSymbolCode(Log):
    def __init__(self, symbol: Any, code: Sequence[int]) -> None:
        self.symbol = symbol
        self.code = tuple(code)
        bits = "".join(str(int(bit)) for bit in self.code)
        super().__init__("EncodedSymbolCode", LogLevel.INFO, f"Symbol: {symbol!r}, Code: {bits or '<empty>'}")


class DegenerateAlphabetLog(Log):
    def __init__(self, symbol: Any) -> None:
        self.symbol = symbol
        super().__init__(
            "Degenerate_alphabet_log",
            LogLevel.WARNING,
            f"Single-symbol alphabet ({symbol!r}): codes are empty and encode emits no bits",
        )


class PreprocessingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Preprocessing_progress_step", LogLevel.PROGRESS, message)


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.preproc_progress_count = 0
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.preprocessor_step_interval_count = 10000
        self.coding_step_interval_count = 10000

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, PreprocessingProgressStep):
                self.preproc_progress_count += 1
                self._log_progress(log, self.preproc_progress_count, self.preprocessor_step_interval_count)
            elif isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                self._log_progress(log, self.coding_progress_count, self.coding_step_interval_count)

    def _log_progress(self, log: Log, count: int, interval: int) -> None:
        if log.total_steps is not None:
            log.message = f"{log.base_message} ({count}/{log.total_steps})"
        else:
            log.message = f"{log.base_message} ({count})"
        if self.record_progress:
            self.logs.append(log)
        if self.display_progress and (count % interval == 0):
            print(log)

    def get_logs(self, log_type: Optional[type] = None) -> list:
        """Return the recorded logs, optionally only those of one Log subclass."""
        if log_type is None:
            return list(self.logs)
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear_logs(self) -> None:
        self.logs = []

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
