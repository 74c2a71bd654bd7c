from divelog.divelist import DiveListView, DiveRow
from divelog.info import FIELDS, DiveInfoView
from divelog.shell import ShellView


class FakeDiveListView(DiveListView):
    def __init__(self):
        self.rows = []
        self.titles = None
        self.selected = None
        self.font = None
        self.updates = 0

    def set_rows(self, rows):
        self.rows = [DiveRow(**vars(row)) for row in rows]

    def update_row(self, position, row):
        self.updates += 1
        self.rows[position] = DiveRow(**vars(row))

    def set_column_titles(self, depth, temperature):
        self.titles = (depth, temperature)

    def select_row(self, position):
        self.selected = position

    def set_font(self, font):
        self.font = font


class FakeDiveInfoView(DiveInfoView):
    def __init__(self):
        self.fields = {field: "" for field in FIELDS}
        self.title = None
        self.reads = []

    def get_text(self, field):
        self.reads.append(field)
        return self.fields[field]

    def set_text(self, field, text):
        self.fields[field] = text

    def set_title(self, title):
        self.title = title


class FakeShellView(ShellView):
    def __init__(self):
        self.error = None
        self.draws = 0
        self.prints = 0

    def show_error(self, message):
        self.error = message

    def hide_error(self):
        self.error = None

    def queue_profile_draw(self):
        self.draws += 1

    def print_profile(self):
        self.prints += 1
