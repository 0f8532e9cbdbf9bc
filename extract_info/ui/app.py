"""Tkinter based results panel for the page scanner."""
from __future__ import annotations

import logging
import os
import queue
import tkinter as tk
import webbrowser
from concurrent.futures import Future, ThreadPoolExecutor
from tkinter import messagebox, ttk
from typing import Dict, Optional, Tuple

from ..config import CONFIG_ENV_VAR, ConfigurationError, load_configuration
from ..factory import build_scan_service
from ..models import ResultBundle
from ..orchestrator import ScanService
from ..sources import HtmlPageSource, PlaywrightPageSource
from .presenter import (
    COPIED_LABEL,
    COPY_FAILED_LABEL,
    COPY_FEEDBACK_MS,
    COPY_LABEL,
    RESCAN_LABEL,
    SCAN_LABEL,
    SCANNING_LABEL,
    ItemView,
    SectionView,
    build_sections,
    page_status,
    perform_scan,
)

LOGGER = logging.getLogger(__name__)


class HoverTip:
    """Shows *text* in a borderless popup while the pointer is over *widget*."""

    def __init__(self, widget: tk.Widget, text: str) -> None:
        self.widget = widget
        self.text = text
        self._window: Optional[tk.Toplevel] = None
        widget.bind("<Enter>", self.show, add="+")
        widget.bind("<Leave>", self.hide, add="+")

    def show(self, _event: Optional[tk.Event] = None) -> None:
        if self._window is not None or not self.text:
            return
        x = self.widget.winfo_rootx() + 12
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 4
        self._window = tk.Toplevel(self.widget)
        self._window.wm_overrideredirect(True)
        self._window.wm_geometry(f"+{x}+{y}")
        tk.Label(
            self._window,
            text=self.text,
            background="#ffffe0",
            relief="solid",
            borderwidth=1,
            padx=4,
            pady=2,
        ).pack()

    def hide(self, _event: Optional[tk.Event] = None) -> None:
        if self._window is not None:
            self._window.destroy()
            self._window = None


class ResultSection(ttk.LabelFrame):
    """One labelled group of results with per-item copy buttons."""

    def __init__(self, master: tk.Misc, app: "ExtractInfoApp", title: str) -> None:
        super().__init__(master, text=f"{title} (0)", padding=6)
        self.app = app
        self.columnconfigure(0, weight=1)

    # ------------------------------------------------------------------
    def render(self, section: SectionView) -> None:
        for child in self.winfo_children():
            child.destroy()
        self.configure(text=section.heading)

        if not section.items:
            ttk.Label(self, text=section.empty_message, foreground="#777777").grid(row=0, column=0, sticky="w")
            return

        for row_index, item in enumerate(section.items):
            self._render_item(row_index, item)

    # ------------------------------------------------------------------
    def _render_item(self, row_index: int, item: ItemView) -> None:
        row = ttk.Frame(self)
        row.grid(row=row_index, column=0, sticky="ew", pady=1)
        row.columnconfigure(2, weight=1)

        copy_button = ttk.Button(row, text=COPY_LABEL, width=8)
        copy_button.configure(command=lambda: self.app.copy_to_clipboard(item.copy_value, copy_button))

        if item.url:
            ttk.Label(row, text=item.icon).grid(row=0, column=0, padx=(0, 4))
            ttk.Label(row, text=item.platform, width=10).grid(row=0, column=1, sticky="w")
            link = ttk.Label(row, text=item.text, foreground="#1a73e8", cursor="hand2")
            link.grid(row=0, column=2, sticky="w")
            link.bind("<Button-1>", lambda _event: self.app.open_url(item.url))
            HoverTip(link, item.tooltip)
        else:
            label = ttk.Label(row, text=item.text, cursor="hand2")
            label.grid(row=0, column=0, columnspan=3, sticky="w")
            # Clicking the row copies, same as the button.
            label.bind("<Button-1>", lambda _event: copy_button.invoke())
        copy_button.grid(row=0, column=3, padx=(8, 0))


class ExtractInfoApp:
    """Main application window."""

    def __init__(self, root: tk.Tk, *, service: Optional[ScanService] = None, target: str = "") -> None:
        self.root = root
        self.root.title("ExtractInfo")
        self.root.geometry("520x640")
        self.root.minsize(420, 480)

        self.service = service or self._build_service()
        self.event_queue: "queue.Queue[Tuple]" = queue.Queue()
        self._executor = ThreadPoolExecutor(max_workers=1)
        self.current_task: Optional[Future[None]] = None
        self.last_bundle: Optional[ResultBundle] = None

        self.target_var = tk.StringVar(value=target)
        self.status_var = tk.StringVar(value="")
        self.error_var = tk.StringVar(value="")
        self.sections: Dict[str, ResultSection] = {}

        self._build_layout()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)
        self.root.after(100, self._poll_queue)

    # ------------------------------------------------------------------
    def _build_layout(self) -> None:
        container = ttk.Frame(self.root, padding=12)
        container.pack(fill="both", expand=True)
        container.columnconfigure(0, weight=1)
        container.rowconfigure(3, weight=1)

        header = ttk.Frame(container)
        header.grid(row=0, column=0, sticky="ew")
        header.columnconfigure(0, weight=1)
        entry = ttk.Entry(header, textvariable=self.target_var)
        entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        entry.bind("<Return>", lambda _event: self.start_scan())
        self.scan_button = ttk.Button(header, text=SCAN_LABEL, command=self.start_scan)
        self.scan_button.grid(row=0, column=1)

        self.error_label = ttk.Label(container, textvariable=self.error_var, foreground="#c62828", wraplength=480)
        self.error_label.grid(row=1, column=0, sticky="ew", pady=(8, 0))

        self.status_label = ttk.Label(container, textvariable=self.status_var, foreground="#555555")
        self.status_label.grid(row=2, column=0, sticky="ew", pady=(8, 0))

        self._build_results_section(container)

    # ------------------------------------------------------------------
    def _build_results_section(self, parent: ttk.Frame) -> None:
        frame = ttk.Frame(parent)
        frame.grid(row=3, column=0, sticky="nsew", pady=(12, 0))
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(0, weight=1)

        canvas = tk.Canvas(frame, highlightthickness=0)
        canvas.grid(row=0, column=0, sticky="nsew")
        scroll = ttk.Scrollbar(frame, orient="vertical", command=canvas.yview)
        scroll.grid(row=0, column=1, sticky="ns")
        canvas.configure(yscrollcommand=scroll.set)

        self.results_frame = ttk.Frame(canvas)
        self.results_frame.columnconfigure(0, weight=1)
        window = canvas.create_window((0, 0), window=self.results_frame, anchor="nw")
        self.results_frame.bind("<Configure>", lambda _event: canvas.configure(scrollregion=canvas.bbox("all")))
        canvas.bind("<Configure>", lambda event: canvas.itemconfigure(window, width=event.width))

        for index, section in enumerate(build_sections(ResultBundle())):
            widget = ResultSection(self.results_frame, self, section.title)
            widget.grid(row=index, column=0, sticky="ew", pady=(0, 8))
            self.sections[section.key] = widget
        self.results_frame.grid_remove()
        self._results_visible = False

    # ------------------------------------------------------------------
    def start_scan(self) -> None:
        if self.current_task and not self.current_task.done():
            return

        self._show_loading()
        target = self.target_var.get()

        def worker() -> None:
            bundle, error = perform_scan(self.service, target)
            if error is not None:
                self.event_queue.put(("error", error))
            else:
                self.event_queue.put(("result", bundle))

        self.current_task = self._executor.submit(worker)

    # ------------------------------------------------------------------
    def _show_loading(self) -> None:
        self.error_var.set("")
        self.status_var.set("")
        self.scan_button.configure(text=SCANNING_LABEL, state="disabled")
        self._set_results_visible(False)

    # ------------------------------------------------------------------
    def _hide_loading(self) -> None:
        self.scan_button.configure(text=RESCAN_LABEL, state="normal")

    # ------------------------------------------------------------------
    def _set_results_visible(self, visible: bool) -> None:
        if visible and not self._results_visible:
            self.results_frame.grid()
        elif not visible and self._results_visible:
            self.results_frame.grid_remove()
        self._results_visible = visible

    # ------------------------------------------------------------------
    def show_error(self, message: str) -> None:
        self.error_var.set(message)
        self._set_results_visible(False)
        self._hide_loading()

    # ------------------------------------------------------------------
    def render_results(self, bundle: ResultBundle) -> None:
        self.last_bundle = bundle
        self.status_var.set(page_status(bundle))
        for section in build_sections(bundle):
            self.sections[section.key].render(section)
        self._set_results_visible(True)
        self._hide_loading()

    # ------------------------------------------------------------------
    def copy_to_clipboard(self, text: str, button: ttk.Button) -> None:
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
            self.root.update_idletasks()
        except tk.TclError:
            LOGGER.exception("Failed to copy %r to the clipboard", text)
            button.configure(text=COPY_FAILED_LABEL)
        else:
            button.configure(text=COPIED_LABEL)
        self.root.after(COPY_FEEDBACK_MS, lambda: self._reset_copy_button(button))

    # ------------------------------------------------------------------
    def _reset_copy_button(self, button: ttk.Button) -> None:
        if button.winfo_exists():
            button.configure(text=COPY_LABEL)

    # ------------------------------------------------------------------
    def open_url(self, url: str) -> None:
        webbrowser.open_new_tab(url)

    # ------------------------------------------------------------------
    def _poll_queue(self) -> None:
        try:
            while True:
                event = self.event_queue.get_nowait()
                self._handle_event(event)
        except queue.Empty:
            pass
        finally:
            self.root.after(100, self._poll_queue)

    # ------------------------------------------------------------------
    def _handle_event(self, event: Tuple) -> None:
        kind = event[0]
        if kind == "result":
            _, bundle = event
            self.render_results(bundle)
        elif kind == "error":
            _, message = event
            self.show_error(message)
        self.current_task = None

    # ------------------------------------------------------------------
    def on_close(self) -> None:
        if self.current_task and not self.current_task.done():
            if not messagebox.askyesno("Quit", "A scan is still running. Quit anyway?"):
                return
        self._executor.shutdown(wait=False, cancel_futures=True)
        try:
            self.service.close()
        except Exception:  # pragma: no cover - best effort on shutdown
            LOGGER.exception("Failed to close page source %s", self.service.source)
        self.root.destroy()

    # ------------------------------------------------------------------
    def _build_service(self) -> ScanService:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        if config_path:
            try:
                return build_scan_service(load_configuration(config_path))
            except ConfigurationError as exc:
                messagebox.showwarning("Configuration error", f"Failed to load configuration: {exc}")
        if PlaywrightPageSource is not None:
            return ScanService(PlaywrightPageSource())
        LOGGER.warning("Playwright is not installed - falling back to the static HTML source")
        return ScanService(HtmlPageSource())


def main(target: str = "", service: Optional[ScanService] = None) -> None:
    root = tk.Tk()
    ExtractInfoApp(root, service=service, target=target)
    root.mainloop()


if __name__ == "__main__":  # pragma: no cover - manual launch
    main()
