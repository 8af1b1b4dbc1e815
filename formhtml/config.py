import json
import copy
from formhtml import utils
from formhtml import log

DEFAULT_POST_ARRAY="FieldValues"

DEFAULT_CONFIG={
    "post_array_name" : DEFAULT_POST_ARRAY,
    "add_unique_id" : True,
    "include_attributes" : {},
    "ajax" : {
        "debug_submit" : False
    },
    "log" : {
        "level" : "INFO"
    }
}

class Config:

    def __init__(self):
        self.is_init=False
        self.output_file="formhtml.json"
        self.is_default=True
        self.config=copy.deepcopy(DEFAULT_CONFIG)

    def _load(self, filename):
        try:
            with open(filename, "r") as f:
                js = json.loads(f.read())
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as err:
            log.w("Unable to read configuration '%s': %s" % (filename, err))
            return False
        if not isinstance(js, dict):
            log.w("Configuration '%s' ignored: top level must be an object" % filename)
            return False
        self.config=utils.deepassign(self.config, js)
        self.is_default=False
        return True

    def init(self, default=None, filename=[]):
        if default is None: default=DEFAULT_CONFIG
        if not isinstance(default, dict): raise ValueError("default configuration must be dict")
        self.config=copy.deepcopy(default)
        self.is_default=True
        if not isinstance(filename, (list, tuple)): filename=[filename]
        for file in filename:
            if self._load(file):
                log.i("Configuration '%s' loaded" % file)
                break
        log.init(self.get("log.level") or "INFO")
        self.is_init=True

    def write(self, path=None):
        if not path: path=self.output_file
        with open(path,"w") as f:
            f.write(json.dumps(self.config, indent=4))

    def get(self, path, default=None):
        curr = self.config
        for key in path.split("."):
            if isinstance(curr, dict) and key in curr:
                curr=curr[key]
            else: return default
        return curr

    def has(self, path):
        curr = self.config
        for key in path.split("."):
            if isinstance(curr, dict) and key in curr:
                curr=curr[key]
            else: return False
        return True

    def set_complete(self, x):
        utils.deepassign(self.config, x)

    def set(self, path, value):
        l = path.split(".")
        curr = self.config
        for key in l[:-1]:
            if key not in curr: curr[key]={}
            curr = curr[key]
        curr[l[-1]]=value
        return value

    def __getitem__(self, item):
        return self.get(item)

    def __setitem__(self, item, val):
        return self.set(item, val)


config=Config()
