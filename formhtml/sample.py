import sys
from formhtml import log
from formhtml.config import config
from formhtml.htmltemplate import FormBuilder


def main(args):
    """ Render a sample <textarea> fragment, returned as a response body """
    config_file=args.get("config")
    if config_file:
        config.init(filename=config_file)
        body="Configuration: %s\n" % config_file
    else:
        body="Configuration: defaults\n"
    builder=FormBuilder()
    body+=builder.div_text_area(args.get("label", "What"), args.get("name", "Why"), args.get("value", "When"), {})
    log.d("sample: rendered %d characters" % len(body))
    return { "body": body }


if __name__=="__main__":
    args={ "config": sys.argv[1] } if len(sys.argv)>1 else {}
    sys.stdout.write(main(args)["body"]+"\n")
