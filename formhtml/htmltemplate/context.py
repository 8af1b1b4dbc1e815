from contextlib import contextmanager
from .attributes import LabelFlags


class RenderContext:
    """
    Mutable state of one form render: the uniqueness counter, the current
    post array name, label/tooltip flags of the element being built, the
    registered tooltips and the checkbox names already given a clearing
    hidden field. One context per builder, never shared between requests.
    """

    def __init__(self, post_array_name, add_unique_id=True):
        self.post_array_name=post_array_name
        self.add_unique_id=add_unique_id
        self.counter=0
        self.tooltip_counter=0
        self.elem_unique_id=""
        self.flags=LabelFlags()
        self.tooltips={}
        self.cleared_checkboxes=set()

    def next_unique(self):
        self.counter+=1
        return self.counter

    def unique_id(self, base, unique=True):
        """ Append the '_N' uniqueness suffix when enabled, remember the result """
        if unique and self.add_unique_id:
            base="%s_%d" % (base, self.next_unique())
        self.elem_unique_id=base
        return base

    def next_tooltip(self):
        self.tooltip_counter+=1
        return self.tooltip_counter

    def reset_element(self):
        self.elem_unique_id=""
        self.flags=LabelFlags()

    # flags only decorate the element that raised them
    def finish_element(self):
        self.flags=LabelFlags()

    def apply(self, flags):
        self.flags.merge(flags)

    @contextmanager
    def post_array(self, name):
        previous=self.post_array_name
        self.post_array_name=name
        try:
            yield self
        finally:
            self.post_array_name=previous
