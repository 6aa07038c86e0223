# UI.py
"""""
PySide6 user interface for the calculator.

Structure
---------
- Calculator UI: main window with display, button grid and history panel
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and buttons
- Collect key presses into an expression buffer
- Dispatch the expression to MathEngine in a worker thread
- Render results and show MathEngine errors as dialogs
- Keep the calculation history (in memory and in the history file)
- Dark/light mode and font size from the settings, clipboard copy

Responsibilities (Settings)
---------------------------
- Load current settings and descriptions via config_manager
- Validate user input (minimum values for integer settings)
- Save and apply theme / font changes immediately


Threading Note
--------------
Evaluation runs off the UI thread in Worker(QObject). The outcome (a float or
an error.MathError) is emitted via a Qt signal and handled back in the UI.
"""""

import logging
import sys
import threading

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, QObject, Signal
import pyperclip

from . import error as E
from . import config_manager as config_manager
from . import history_manager as history_manager
from . import MathEngine as MathEngine

logger = logging.getLogger(__name__)

APPROX_SIGN = "≈"
RETURN_KEY = "⏎"
SETTINGS_KEY = "⚙"
COPY_KEY = "\U0001f4cb"  # "📋"

OPERATOR_KEYS = ["+", "-", "*", "/", "^", "!"]

DARK_STYLESHEET = "background-color: #121212; color: white; font-weight: bold;"


class Worker(QObject):
    """""

    Runs in a separate thread, hands the problem to MathEngine.evaluate and
    emits the outcome back to the Calculator UI for processing.

    """""

    job_finished = Signal(object, str)

    def __init__(self, problem):
        super().__init__()
        self.data = problem

    def run_Calc(self):
        outcome = MathEngine.evaluate(self.data)
        if outcome.error is not None:
            self.job_finished.emit(outcome.error, self.data)
        else:
            self.job_finished.emit(outcome.value, self.data)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Boolean settings become checkboxes, integer settings
    become input fields; nothing is written unless every input is valid.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(320, 220)

        main_layout = QtWidgets.QVBoxLayout(self)

        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                minimum = config_manager.MINIMUM_VALUES.get(key_value, 0)
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(f"{description} (min. {minimum}):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        new_settings = dict(self.setting_value_list)

        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QCheckBox):
                new_settings[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()
                if new_value_str == "":
                    continue  # keep the old value

                try:
                    new_value_int = int(new_value_str)
                    minimum = config_manager.MINIMUM_VALUES.get(key_value, 0)
                    if new_value_int < minimum:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is {minimum}.")
                except ValueError as e:
                    logger.info("Invalid input for %s: %s", key_value, e)
                    QtWidgets.QMessageBox.critical(
                        self, "Invalid Input:",
                        f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return

                new_settings[key_value] = new_value_int

        try:
            config_manager.save_setting(new_settings)
        except E.ConfigurationError as e:
            QtWidgets.QMessageBox.critical(
                self, "Error", f"Error {e.code}: {E.ERROR_MESSAGES.get(e.code, '')}{e.message}")
            return

        self.setting_value_list = new_settings
        self.settings_saved.emit()
        self.accept()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        self.setting_value_list = config_manager.load_setting_value("all")

        self.display_text = ""  # expression being typed
        self.calculator_result = ""  # last result, rendered
        self.received_result = False  # is the display showing a result?
        self.thread_active = False
        self.history = []

        self.button_objects = {}
        self.setWindowTitle("Calculator")
        self.resize(420, 620)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- Display ---
        self.display = QtWidgets.QLineEdit("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- Button grid ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 4)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column)
        self.buttons = [
            (SETTINGS_KEY, 0, 0), (COPY_KEY, 0, 1), ('(', 0, 2), (')', 0, 3), ('<', 0, 4),
            ('sin(', 1, 0), ('7', 1, 1), ('8', 1, 2), ('9', 1, 3), ('/', 1, 4),
            ('cos(', 2, 0), ('4', 2, 1), ('5', 2, 2), ('6', 2, 3), ('*', 2, 4),
            ('tan(', 3, 0), ('1', 3, 1), ('2', 3, 2), ('3', 3, 3), ('-', 3, 4),
            ('log(', 4, 0), ('0', 4, 1), ('.', 4, 2), ('!', 4, 3), ('+', 4, 4),
            ('exp(', 5, 0), ('sqrt(', 5, 1), ('^', 5, 2), ('C', 5, 3), (RETURN_KEY, 5, 4),
        ]

        for text, row, col in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)
            if text == SETTINGS_KEY:
                button.clicked.connect(self.open_settings)
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        # --- History panel ---
        self.history_list = QtWidgets.QListWidget()
        self.history_list.itemDoubleClicked.connect(self.reuse_history_entry)
        main_v_layout.addWidget(self.history_list, 2)

        history_row = QtWidgets.QHBoxLayout()
        main_v_layout.addLayout(history_row)
        for text, handler in (("Save History", self.save_history),
                              ("Load History", self.load_history),
                              ("Clear History", self.clear_history)):
            button = QtWidgets.QPushButton(text)
            button.clicked.connect(handler)
            history_row.addWidget(button)
            self.button_objects[text] = button

        self.apply_settings()

    # --- Keyboard ---
    def keyPressEvent(self, event):
        key = event.key()
        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.handle_button_press(RETURN_KEY)
        elif key == Qt.Key.Key_Backspace:
            self.handle_button_press('<')
        elif key == Qt.Key.Key_Escape:
            self.handle_button_press('C')
        elif event.text() and event.text().isprintable():
            self.handle_button_press(event.text())
        else:
            super().keyPressEvent(event)

    # --- Input handling ---
    def handle_button_press(self, value):
        if value == RETURN_KEY:
            self.start_calculation()
            return

        if value == COPY_KEY:
            pyperclip.copy(self.display.text())
            return

        if value == "C":
            self.display_text = ""

        elif value == "<":
            if self.received_result:
                self.display_text = ""
            self.display_text = self.display_text[:-1]

        elif self.received_result and value in OPERATOR_KEYS:
            # continue with the last result
            self.display_text = self.result_as_operand() + value

        elif self.received_result:
            self.display_text = value

        else:
            self.display_text += value

        self.received_result = False
        self.display.setText(self.display_text or "0")

    def result_as_operand(self):
        # There is no unary minus, so a negative result is written as (0-x)
        if not self.calculator_result or self.calculator_result in ("inf", "-inf", "nan"):
            return ""
        if self.calculator_result.startswith("-"):
            return f"(0{self.calculator_result})"
        return self.calculator_result

    def start_calculation(self):
        if self.thread_active:
            logger.warning("A calculation is already running!")  # 4002
            return
        if self.received_result:
            return

        self.thread_active = True
        self.display.setText("...")
        QtWidgets.QApplication.processEvents()

        worker_instance = Worker(self.display_text)
        worker_instance.job_finished.connect(self.Calc_result)
        my_thread = threading.Thread(target=worker_instance.run_Calc, daemon=True)
        my_thread.start()

    def Calc_result(self, result, equation):
        self.thread_active = False

        if isinstance(result, E.MathError):
            self.show_error(result)
            self.display.setText(equation or "0")
            return

        decimal_places = self.setting_value_list["decimal_places"]
        rendered, rounded = MathEngine.format_result(result, decimal_places)
        sign = APPROX_SIGN if rounded else "="

        self.calculator_result = rendered
        self.received_result = True

        if self.setting_value_list["show_equation"]:
            self.display.setText(f"{equation} {sign} {rendered}")
        else:
            self.display.setText(f"{sign} {rendered}")

        self.add_history_entry(history_manager.format_entry(equation, rendered))

    # --- History ---
    def add_history_entry(self, entry):
        self.history.append(entry)
        self.history_list.addItem(entry)
        if self.setting_value_list["save_history"]:
            try:
                history_manager.append_entry(entry)
            except E.HistoryError as e:
                self.show_error(e)

    def reuse_history_entry(self, item):
        expression = item.text().rsplit(" = ", 1)[0]
        self.display_text = expression
        self.received_result = False
        self.display.setText(expression)

    def save_history(self):
        try:
            history_manager.save_history(self.history)
        except E.HistoryError as e:
            self.show_error(e)
            return
        QtWidgets.QMessageBox.information(self, "History", "Calculation history saved to file.")

    def load_history(self):
        try:
            self.history = history_manager.load_history()
        except E.HistoryError as e:
            self.show_error(e)
            return
        self.history_list.clear()
        self.history_list.addItems(self.history)

    def clear_history(self):
        self.history = []
        self.history_list.clear()

    # --- Settings / look ---
    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()

        self.setting_value_list = config_manager.load_setting_value("all")
        self.apply_settings()

    def apply_settings(self):
        font_size = self.setting_value_list["font_size"]

        font = self.display.font()
        font.setPointSize(font_size * 2)
        self.display.setFont(font)

        for text, button in self.button_objects.items():
            font = button.font()
            font.setPointSize(font_size if text not in ("Save History", "Load History", "Clear History")
                              else max(font_size // 2, 8))
            button.setFont(font)

        if self.setting_value_list["darkmode"]:
            for text, button in self.button_objects.items():
                button.setStyleSheet(DARK_STYLESHEET)
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet(DARK_STYLESHEET)
            self.history_list.setStyleSheet("background-color: #1e1e1e; color: white;")
        else:
            for text, button in self.button_objects.items():
                button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")
            self.history_list.setStyleSheet("")

        return_button = self.button_objects.get(RETURN_KEY)
        if return_button:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"]:
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton { background-color: #2e2e2e; color: white; border: 1px solid #444444; }
            """
        return ""

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_code = error_obj.code
        additional_info = f"Details: {error_obj.message}"
        if error_obj.equation is not None:
            additional_info += f"\nEquation: {error_obj.equation}"

        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        error_box.setWindowTitle(E.Error_Dictionary.get(error_code[:1], "Calculation error"))
        error_box.setText(f"Error {error_code}: {E.ERROR_MESSAGES.get(error_code, 'Unknown error')}")
        error_box.setInformativeText(additional_info)
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    return app.exec()
