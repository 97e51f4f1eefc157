# studytimer

The core of a study companion application as a plain Python library with
no third-party dependencies. It holds the state and rules behind each part
of the application:

- a study **timer** with start, pause, reset and a debug time offset
  (`studytimer.timer`, `studytimer.debug`);
- **study data**: sessions, todos, reminders and flashcard decks, kept in a
  JSON file (`studytimer.data`);
- **flashcards** scheduled with an SM-2 style algorithm
  (`studytimer.flashcard`);
- **settings**: navigation layout, colour themes and tab configuration,
  kept in a JSON file (`studytimer.settings`);
- **tabs**: tab kinds, the new-tab selector, open tab instances and a
  two-pane split (`studytimer.tabs`, `studytimer.tab_manager`);
- a scientific **calculator** driven by button labels
  (`studytimer.calculator`);
- a small **terminal** with built-in file commands, history, fuzzy file
  search and a pager (`studytimer.terminal`, `studytimer.fsops`);
- keyboard shortcuts, dropped files and status messages
  (`studytimer.keyboard`, `studytimer.file_drop`, `studytimer.status`);
- `StudyTimerApp`, which ties these together (`studytimer.app`).

Python 3.10 or later is required.

## Timer

```python
from studytimer.timer import Timer

timer = Timer()
timer.start()
# ... study ...
timer.pause()
print(timer.elapsed_minutes())
```

`Timer.add_time(minutes)` adds whole seconds to a debug offset that
`reset()` leaves in place. `studytimer.debug.DebugTools` wraps the offset
operations (`add_configured_time`, `add_minutes`, `reset_offset`,
`describe_offset`) and returns the message for each.

## Study data

```python
from studytimer.data import StudyData

data = StudyData.load("study_data.json")   # empty data if the file is missing
data.add_session("2024-05-01", 25.0, "Algebra")
data.add_todo("Read chapter 3")
print(data.total_minutes())
```

The methods that add, change or remove sessions, todos, reminders and
decks write the file at once. Sessions on the same date with the same
description are merged, and sessions of zero or fewer minutes are ignored.
`today_minutes(today)` and `last_n_days_minutes(days, today)` sum recent
sessions. Reminders carry `NotificationPeriod` values
(`NotificationPeriod.ONE_DAY`, `THREE_DAYS`, `ONE_WEEK`, or
`NotificationPeriod("Custom", days)`).

## Flashcards

```python
from studytimer.flashcard import Grade

deck_id = data.add_deck("Vocabulary", None)
deck = data.deck(deck_id)
card_id = deck.add_card("hund", "dog")
deck.card(card_id).add_review(Grade.GOOD)
data.save()
```

Changes made directly to a deck or card are written when `data.save()` is
called. `Card.add_review(grade, today)` sets the next interval, ease factor
and due date from a `Grade` (`AGAIN`, `HARD`, `GOOD`, `EASY`);
`Deck.due_cards(today)` and `StudyData.due_cards_count(today)` report what
is due.

## Settings and tabs

```python
from studytimer.settings import AppSettings, PresetTheme
from studytimer.tab_manager import SplitDirection, TabManager
from studytimer.tabs import Tab

settings = AppSettings.load("app_settings.json")   # defaults if missing
settings.theme_preset = PresetTheme.OCEAN
settings.save("app_settings.json")

tabs = TabManager(settings)
tabs.add_tab(Tab.CALCULATOR)
tabs.create_split(SplitDirection.VERTICAL)
```

`AppSettings.current_colors()` gives the `ColorTheme` in use. A
`TabManager` always keeps a Settings tab, which cannot be closed, and opens
a Timer tab when the last tab closes.

## Calculator

```python
from studytimer.calculator import Calculator

calc = Calculator()
for label in ["1", "2", "+", "3", "="]:
    calc.press(label)
print(calc.display)   # 15
```

`press` accepts the labels of the calculator's buttons: digits, operators,
memory keys, scientific functions and constants. An invalid operation puts
`Error` on the display and a message on the calculator's `status`.

## Terminal

```python
from studytimer.terminal import TerminalEmulator

terminal = TerminalEmulator()
terminal.run("mkdir notes")
print(terminal.run("tree").content)
```

Built-in commands are `cd`, `pwd`, `ls`, `mkdir`, `touch`, `rm`, `cp`,
`mv`, `cat`, `less`/`more`, `tree`, `grep`, `fuzzy`, `clear`, `help` and
`exit`; anything else is run as a system command in the terminal's current
directory. The terminal starts in a `files` directory, created if needed.

## Application state

`StudyTimerApp()` loads `study_data.json` and `app_settings.json` from the
working directory (falling back to empty data and default settings) and
offers the actions behind the window's controls: `handle_keyboard_shortcuts`,
`open_dropped_files`, `add_selected_tab`, `activate_tab` and
`update_last_used_split_pane`.

## What is not included

The package has no window, drawing or event loop and no command to start
one: there are no screens for the tabs, no charts, no Markdown editor or
file browser, and no weather display. It provides the state and operations
such an interface would use.