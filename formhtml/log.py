import datetime
import sys

def _time_str():
    return datetime.datetime.today().strftime("%d/%m/%Y %H:%M:%S.%f")

class Log:
    """
    Levelled logger writing 'dd/mm/yyyy hh:mm:ss.micro|LEVEL| message'
    lines to a file object. Multi-line messages give one line each.
    """
    DEBUG=0
    INFO=1
    WARN=2
    ERROR=3
    CRITICAL=4
    LEVEL_STR=["DEBUG", "INFO", "WARN", "ERROR", "CRITICAL"]
    _INSTANCE=None

    def __init__(self, level, fd):
        self.fd=fd
        self.lvl=level

    def enabled(self, lvl):
        return lvl>=self.lvl

    def log(self, level, *args):
        if not self.enabled(level): return
        line=" ".join([str(x) for x in args])
        prefix=_time_str()+"|"+Log.LEVEL_STR[level]+"| "
        self.fd.write("".join([prefix+l+"\n" for l in line.split("\n")]))

    def debug(self, *args): return self.log(Log.DEBUG, *args)
    def d(self, *args): return self.log(Log.DEBUG, *args)

    def info(self, *args): return self.log(Log.INFO, *args)
    def i(self, *args): return self.log(Log.INFO, *args)

    def warn(self, *args): return self.log(Log.WARN, *args)
    def w(self, *args): return self.log(Log.WARN, *args)

    def error(self, *args): return self.log(Log.ERROR, *args)
    def e(self, *args): return self.log(Log.ERROR, *args)

    def critical(self, *args): return self.log(Log.CRITICAL, *args)
    def c(self, *args): return self.log(Log.CRITICAL, *args)

    # "debug", "INFO", "warning"... as written in the configuration
    @staticmethod
    def level_from_str(name):
        name=str(name).upper()
        if name=="WARNING": name="WARN"
        if name not in Log.LEVEL_STR: raise ValueError("Unknown log level '%s'" % name)
        return Log.LEVEL_STR.index(name)

    @staticmethod
    def init(level=INFO, fd=None):
        if isinstance(level, str): level=Log.level_from_str(level)
        Log._INSTANCE = Log(level, fd if fd else sys.stdout)



if not Log._INSTANCE:
    Log.init(Log.INFO)

def init(level=Log.INFO, fd=None): Log.init(level, fd)

def log(lvl, *args): Log._INSTANCE.log(lvl, *args)

def debug(*args): log(Log.DEBUG, *args)
def d(*args): log(Log.DEBUG, *args)

def info(*args): log(Log.INFO, *args)
def i(*args): log(Log.INFO, *args)

def warn(*args): log(Log.WARN, *args)
def w(*args): log(Log.WARN, *args)

def error(*args): log(Log.ERROR, *args)
def e(*args): log(Log.ERROR, *args)

def critical(*args): log(Log.CRITICAL, *args)
def c(*args): log(Log.CRITICAL, *args)
