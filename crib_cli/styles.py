from __future__ import annotations

# Centralized Textual stylesheet for the cribbage counter TUI.
APP_CSS = """
Screen {
    background: #0f2d1b;
    color: #f4f4f4;
}

Button {
    text-style: none;
}

Button:hover {
    text-style: none;
}

Button:focus {
    text-style: none;
}

#layout {
    height: 1fr;
}

#left_col {
    width: 40%;
    border: solid #2b6746;
    padding: 1 1;
}

#center_col {
    width: 60%;
    border: solid #2b6746;
    padding: 1 1;
}

#status {
    height: 5;
    border: round #40845f;
    padding: 0 1;
    margin-bottom: 1;
}

#tally {
    height: 9;
    border: round #40845f;
    padding: 0 1;
    margin-bottom: 1;
}

#log {
    height: 1fr;
    border: round #40845f;
}

#hand_title {
    height: 2;
}

#hand_row {
    height: 9;
    margin-bottom: 1;
}

#center_spacer {
    height: 1fr;
}

.card {
    width: 14;
    height: 7;
    margin-right: 1;
    border: tall #63b789;
    content-align: center middle;
}

.starter {
    border: tall #f6b73c;
    color: #ffe1a7;
}

.scoring {
    border: tall #d83a56;
}

#controls {
    height: 3;
}

.control {
    width: 16;
    margin-right: 1;
}
"""
