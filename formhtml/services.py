class Services:
    """
    Collaborators of the form builder owned by the surrounding application.

    The defaults keep the builder usable on its own: values pass through
    undecrypted, existing files have no link, option lists are minimal.
    Applications subclass and override what they provide.
    """

    def decrypt_value(self, value):
        return value

    def display_url(self, file_id):
        return ""

    def file_link(self, file_id, text):
        url=self.display_url(file_id)
        return '<a href="%s">%s</a>' % (url, text) if url else ""

    def on_click_new_window(self, url):
        return "window.open('%s', '_blank');" % url

    def state_options(self):
        return { "-1": "-- State --" }

    def phone_options(self):
        return { "Mobile": "Mobile", "Home": "Home", "Work": "Work" }

    def user_state(self):
        return ""
