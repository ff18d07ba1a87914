class FormulaSyntaxError(ValueError):
    def __init__(self, formula, column=None):
        where = f" at column {column}" if column is not None else ""
        super().__init__(f"Malformed formula{where}: {formula!r}")
        self.formula = formula
        self.column = column


class ScriptSyntaxError(ValueError):
    def __init__(self, line, column, text=""):
        super().__init__(f"Invalid proof script command at line {line}, column {column}: {text!r}")
        self.line = line
        self.column = column
        self.text = text


class UnknownLineError(KeyError):
    def __init__(self, line_id):
        super().__init__(f"No proof line with id {line_id}")
        self.line_id = line_id

    def __str__(self):
        return self.args[0]


class InvalidConfigError(ValueError):
    def __init__(self, key, value):
        super().__init__(f"Invalid value for {key}: {value!r}")
        self.key = key
        self.value = value
