from datetime import datetime
from functools import wraps
from typing import Callable, List


class CalcDebug:
    class NT:
        def __init__(self, name: str):
            self.name = name
            self.components = []

    class Entry:
        def __init__(self, source: str, message: str):
            self.time = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.source = source
            self.message = message

        def __str__(self) -> str:
            return f"[{self.time}] [{self.source}] {self.message}"

    def __init__(self, file: str = None):
        self.root = []
        self.current = self.root
        self.stack = []
        self.file = file

    def add(self, item):
        self.current.append(item)

    def log(self, source: str, message: str):
        self.add(self.Entry(source, message))

    def push(self, func_name: str):
        nt = self.NT(func_name)
        self.add(nt)
        self.stack.append(self.current)
        self.current = nt.components

    def pop(self):
        self.current = self.stack.pop()

    def entries(self, node: List = None) -> List[Entry]:
        # Flattened log lines, in the order they were added
        node = self.root if node is None else node
        found = []
        for item in node:
            if isinstance(item, self.NT):
                found += self.entries(item.components)
            elif isinstance(item, self.Entry):
                found.append(item)
        return found

    def toStr(self, node: List, indent: int = 0) -> str:
        # Tokens are rendered through their own __str__
        from Tokenizer import Token

        string = ""

        for item in node:
            if isinstance(item, self.NT):
                string += f"{'| ' * indent}NT:{item.name}\n"
                string += self.toStr(indent=indent+1, node=item.components)
            elif isinstance(item, (Token, self.Entry)):
                string += f"{'| ' * indent}{item}\n"
            else:
                raise Exception("Internal error: debug node of unexpected "
                                f"type {type(item)}")

        return string

    def dump(self):
        if self.file:
            with open(self.file, "a") as f:
                f.write(self.toStr(self.root))
        else:
            print(self.toStr(self.root), end="")


def traced(func: Callable):
    # Groups everything a step logs under its name in self.debug
    @wraps(func)
    def wrapStep(self, *args, **kargs):
        try:
            if self.debug:
                self.debug.push(func.__name__)
            return func(self, *args, **kargs)

        except Exception as e:
            if self.debug:
                self.debug.log(type(self).__name__,
                               f"ERROR: {type(e).__name__}: {e}")
            raise e

        finally:
            if self.debug:
                self.debug.pop()

    return wrapStep
