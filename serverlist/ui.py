"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (header, tabs, Treeview, form dialog, toasts, footer).
- Inputs: ServerRegistry (injected), Notifier (for the desktop toggle).
- Outputs: None (renders UI, calls registry operations).
- Side effects: Creates windows; writes the clipboard through the registry.
- Thread-safety: UI code runs on the main thread only.
"""

import tkinter as tk
from tkinter import ttk, messagebox

from .config import (
    APP_SUBTITLE,
    APP_TITLE,
    COLOR_BG,
    COLOR_FG,
    COLOR_MUTED,
    COLOR_OFFLINE,
    COLOR_PANEL,
    REFRESH_INTERVAL_SEC,
    TABS,
    THEME,
    WINDOW_TITLE,
)
from .forms import MODE_ADD, FormSession
from .models import ServerStatus
from .notify import Notifier
from .repository import ServerNotFoundError, ServerRegistry
from .utils import footer_text, format_status, status_tag


class ToastStack:
    """Small labels stacked in the bottom-right corner; each one destroys itself after its duration."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self._labels: list[tk.Label] = []

    def show(self, message: str, duration_ms: int) -> None:
        label = tk.Label(
            self.root,
            text=message,
            fg=COLOR_FG,
            bg=COLOR_PANEL,
            padx=12,
            pady=6,
            relief=tk.SOLID,
            borderwidth=1,
            font=("Consolas", 10),
        )
        self._labels.append(label)
        self._restack()
        self.root.after(duration_ms, lambda: self._dismiss(label))

    def _dismiss(self, label: tk.Label) -> None:
        if label in self._labels:
            self._labels.remove(label)
        label.destroy()
        self._restack()

    def _restack(self) -> None:
        for i, label in enumerate(reversed(self._labels)):
            label.place(relx=1.0, rely=1.0, x=-12, y=-40 - i * 36, anchor="se")


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        registry (ServerRegistry): the authoritative collection
        form (FormSession): the single add/edit form
        enable_notifications (tk.BooleanVar): toggles desktop notifications
    - Public methods:
        refresh_ui(): repaint the table and footer from the registry
    """

    def __init__(self, root: tk.Tk, registry: ServerRegistry, notifier: Notifier):
        self.root = root
        self.registry = registry
        self.notifier = notifier
        self.form = FormSession(registry)
        self._form_window: tk.Toplevel | None = None

        self.enable_notifications = tk.BooleanVar(value=notifier.desktop_enabled)

        # Window
        self.root.title(WINDOW_TITLE)
        self.root.rowconfigure(2, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg=COLOR_BG)
        self.root.minsize(760, 420)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background=COLOR_PANEL,
            foreground=COLOR_FG,
            fieldbackground=COLOR_PANEL,
            rowheight=26,
            font=("Consolas", 10),
        )
        style.configure(
            "Treeview.Heading",
            background=COLOR_BG,
            foreground=COLOR_FG,
            font=("Consolas", 10, "bold"),
        )
        style.map("Treeview", background=[('selected', '#1f3a1f')], foreground=[])
        style.configure("TNotebook", background=COLOR_BG, borderwidth=0)
        style.configure("TNotebook.Tab", background=COLOR_BG, foreground=COLOR_MUTED, padding=(16, 6))
        style.map("TNotebook.Tab", foreground=[('selected', COLOR_FG)], background=[('selected', COLOR_PANEL)])

        # Header
        tk.Label(
            self.root, text=APP_TITLE, fg=COLOR_FG, bg=COLOR_BG, font=("Consolas", 22, "bold")
        ).grid(row=0, column=0, sticky="w", padx=16, pady=(12, 0))
        tk.Label(
            self.root, text=APP_SUBTITLE, fg=COLOR_MUTED, bg=COLOR_BG, font=("Consolas", 10)
        ).grid(row=1, column=0, sticky="nw", padx=16, pady=(0, 8))

        # Tabs
        self.notebook = ttk.Notebook(self.root)
        self.notebook.grid(row=2, column=0, sticky="nsew", padx=10, pady=(0, 5))
        tabs: dict[str, tk.Frame] = {}
        for name in TABS:
            tabs[name] = tk.Frame(self.notebook, bg=COLOR_BG)
            self.notebook.add(tabs[name], text=name.upper())

        self._build_servers_tab(tabs["servers"])
        self._build_settings_tab(tabs["settings"])

        # Footer
        self.footer = tk.Label(self.root, text="", fg=COLOR_MUTED, bg=COLOR_BG, font=("Consolas", 9))
        self.footer.grid(row=3, column=0, sticky="ew", padx=10, pady=(0, 10))

        # Initial paint
        self.refresh_ui()

    # ---------- Layout ----------

    def _build_servers_tab(self, parent: tk.Frame) -> None:
        parent.rowconfigure(0, weight=1)
        parent.columnconfigure(0, weight=1)

        self.columns = ("name", "ip", "status", "location", "uptime")
        self.tree = ttk.Treeview(parent, columns=self.columns, show="headings", selectmode="browse")
        self.tree.grid(row=0, column=0, sticky="nsew", padx=6, pady=(8, 5))

        self.tree.tag_configure("online", foreground=COLOR_FG)
        self.tree.tag_configure("offline", foreground=COLOR_OFFLINE)

        headers = {
            "name": "Name",
            "ip": "IP Address",
            "status": "Status",
            "location": "Location",
            "uptime": "Uptime",
        }
        for col in self.columns:
            self.tree.heading(col, text=headers[col])

        # Double-click a row to copy its IP
        self.tree.bind("<Double-1>", self.on_double_click)

        button_frame = tk.Frame(parent, bg=COLOR_BG)
        button_frame.grid(row=1, column=0, sticky="ew", padx=6, pady=(0, 8))

        ttk.Button(button_frame, text="Add Server", command=self.add_server).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Edit Server", command=self.edit_server).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete Server", command=self.delete_server).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Copy IP", command=self.copy_selected_ip).pack(side=tk.LEFT, padx=5)

    def _build_settings_tab(self, parent: tk.Frame) -> None:
        tk.Label(
            parent, text="> SYSTEM SETTINGS", fg=COLOR_FG, bg=COLOR_BG, font=("Consolas", 16, "bold")
        ).pack(anchor="w", padx=16, pady=(16, 8))
        tk.Label(
            parent, text="Configuration options coming soon...", fg=COLOR_MUTED, bg=COLOR_BG
        ).pack(anchor="w", padx=16, pady=(0, 8))

        self.settings_lines = tk.Label(
            parent, text="", fg=COLOR_MUTED, bg=COLOR_BG, justify=tk.LEFT, font=("Consolas", 10)
        )
        self.settings_lines.pack(anchor="w", padx=16)
        self._render_settings()

        tk.Checkbutton(
            parent,
            text="Enable Notifications",
            variable=self.enable_notifications,
            command=self.toggle_notifications,
            fg=COLOR_FG,
            bg=COLOR_BG,
            selectcolor=COLOR_PANEL,
            activebackground=COLOR_BG,
            activeforeground=COLOR_FG,
        ).pack(anchor="w", padx=16, pady=(12, 0))

    def _render_settings(self) -> None:
        self.settings_lines.configure(
            text="\n".join(
                (
                    f"> refresh_interval: {REFRESH_INTERVAL_SEC}s",
                    f"> notification_enabled: {str(self.notifier.desktop_enabled).lower()}",
                    f"> theme: {THEME}",
                )
            )
        )

    # ---------- UI callbacks & utilities ----------

    def toggle_notifications(self) -> None:
        self.notifier.desktop_enabled = self.enable_notifications.get()
        self._render_settings()

    def refresh_ui(self) -> None:
        """
        Purpose: Rebuild the Tree rows from the registry (insertion order) and stamp the footer.
        Side effects: Mutates Treeview items (UI only); keeps the selection when the row still exists.
        """
        selected = self.tree.selection()
        self.tree.delete(*self.tree.get_children())
        for record in self.registry.list():
            self.tree.insert(
                "",
                "end",
                iid=str(record.id),
                values=(record.name, record.ip, format_status(record.status), record.location, record.uptime),
                tags=(status_tag(record.status),),
            )
        keep = [iid for iid in selected if self.tree.exists(iid)]
        if keep:
            self.tree.selection_set(keep)
        self.footer.configure(text=footer_text())

    def _selected_id(self, action: str) -> int | None:
        selected = self.tree.selection()
        if not selected:
            messagebox.showinfo(action, "Select a server first.")
            return None
        return int(selected[0])

    def on_double_click(self, event) -> None:
        row_id = self.tree.identify_row(event.y)
        if not row_id:
            return
        self._copy_ip(int(row_id))

    def copy_selected_ip(self) -> None:
        server_id = self._selected_id("Copy IP")
        if server_id is not None:
            self._copy_ip(server_id)

    def _copy_ip(self, server_id: int) -> None:
        try:
            record = self.registry.get(server_id)
        except ServerNotFoundError as e:
            messagebox.showerror("Copy IP", str(e))
            return
        self.registry.copy_address(record.ip)

    # ---------- CRUD ----------

    def add_server(self) -> None:
        if self.form.is_open:
            return
        self.form.open_add()
        self._open_form_window()

    def edit_server(self) -> None:
        if self.form.is_open:
            return
        server_id = self._selected_id("Edit Server")
        if server_id is None:
            return
        try:
            self.form.open_edit(server_id)
        except ServerNotFoundError as e:
            messagebox.showerror("Edit Server", str(e))
            return
        self._open_form_window()

    def delete_server(self) -> None:
        """
        Purpose: Remove the selected server after confirmation.
        Side effects: Mutates the registry (which emits the "deleted" notification).
        """
        server_id = self._selected_id("Delete Server")
        if server_id is None:
            return
        try:
            name = self.registry.get(server_id).name
            if not messagebox.askyesno("Delete Server", f"Delete {name}?"):
                return
            self.registry.remove(server_id)
        except ServerNotFoundError as e:
            messagebox.showerror("Delete Server", str(e))
        self.refresh_ui()

    # ---------- Form dialog ----------

    def _open_form_window(self) -> None:
        """
        Purpose: Show the single add/edit dialog bound to self.form.
                 Closing the window counts as Cancel.
        """
        draft = self.form.draft
        win = tk.Toplevel(self.root)
        self._form_window = win
        if self.form.mode == MODE_ADD:
            win.title("Add Server")
        else:
            win.title(f"Edit Server {draft.name}")
        win.configure(bg=COLOR_BG)
        win.transient(self.root)
        win.protocol("WM_DELETE_WINDOW", self._cancel_form)

        entries = {}
        labels = (("name", "Name"), ("ip", "IP Address"), ("location", "Location"), ("uptime", "Uptime"))
        for row, (field, text) in enumerate(labels):
            tk.Label(win, text=text, fg=COLOR_FG, bg=COLOR_BG).grid(row=row, column=0, sticky="e", padx=5, pady=5)
            entry = tk.Entry(win, width=28)
            entry.insert(0, getattr(draft, field))
            entry.grid(row=row, column=1, padx=5, pady=5)
            entries[field] = entry

        tk.Label(win, text="Status", fg=COLOR_FG, bg=COLOR_BG).grid(row=4, column=0, sticky="e", padx=5, pady=5)
        v_status = tk.StringVar(value=draft.status.value)
        ttk.Combobox(
            win, textvariable=v_status, values=[s.value for s in ServerStatus], state="readonly", width=26
        ).grid(row=4, column=1, padx=5, pady=5)

        def save():
            current = self.form.draft
            current.name = entries["name"].get()
            current.ip = entries["ip"].get()
            current.location = entries["location"].get()
            current.uptime = entries["uptime"].get()
            current.status = ServerStatus.parse(v_status.get())
            try:
                self.form.save()
            except ServerNotFoundError as e:
                messagebox.showerror("Save Server", str(e), parent=win)
                return
            self._close_form_window()
            self.refresh_ui()

        button_row = tk.Frame(win, bg=COLOR_BG)
        button_row.grid(row=5, column=0, columnspan=2, pady=10)
        ttk.Button(button_row, text="Save", command=save).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_row, text="Cancel", command=self._cancel_form).pack(side=tk.LEFT, padx=5)

        entries["name"].focus_set()

    def _cancel_form(self) -> None:
        if self.form.is_open:
            self.form.cancel()
        self._close_form_window()

    def _close_form_window(self) -> None:
        if self._form_window is not None:
            self._form_window.destroy()
            self._form_window = None
