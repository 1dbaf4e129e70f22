"""
logger.py

Logging module for infosource.


"""


from datetime import datetime
from typing import Union, List

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2


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


class SourceCreationLog(Log):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__("Source_creation_log", LogLevel.INFO, f"Length: {length}")


class ProbabilityAssignmentLog(Log):
    def __init__(self, total: float) -> None:
        self.total = total
        super().__init__("Probability_assignment_log", LogLevel.INFO, f"Sum: {total}")


class CodeAssignmentLog(Log):
    def __init__(self, codes: List[str]) -> None:
        self.codes = codes
        super().__init__("Code_assignment_log", LogLevel.INFO, f"Codes: {codes}")


class SourceAssignmentLog(Log):
    def __init__(self, labels: List[str]) -> None:
        self.labels = labels
        super().__init__("Source_assignment_log", LogLevel.INFO, f"Source symbols: {labels}")


class ValidationFailureLog(Log):
    def __init__(self, operation: str, error: Exception) -> None:
        self.operation = operation
        self.error = error
        super().__init__("Validation_failure_log", LogLevel.WARNING,
                         f"{operation} rejected: {error}")


class Logger:
    def __init__(self) -> None:
        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True

        self.display_info = False
        self.display_warning = True
        self.display_error = True

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
        else:
            raise ValueError(f"Unknown log level: {log.level}")

    def get_logs(self, log_type: type = Log) -> List[Log]:
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear_logs(self) -> None:
        self.logs = []

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
