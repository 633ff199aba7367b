from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from sfm.domain.models import CLIENT_TYPES, client_type_label, client_type_value

FILTER_LABELS = {"All": "all", "Normal": "1", "Premium": "2"}


class ClientsView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.screen = app.clients
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Clients")

        self.error_var = tk.StringVar(value="")
        self.filter_var = tk.StringVar(value="All")
        self.form_title = tk.StringVar(value="Register client")
        self.type_var = tk.StringVar(value="Normal")
        self._records: dict[str, dict] = {}

        self._build()

    def _build(self):
        tab = self.frame

        ttk.Label(tab, textvariable=self.error_var, style="Error.TLabel").pack(anchor="w", padx=10, pady=(8, 0))

        top = ttk.Frame(tab)
        top.pack(fill="x", padx=10, pady=8)
        ttk.Label(top, text="Filter").pack(side="left")
        combo = ttk.Combobox(top, textvariable=self.filter_var, values=list(FILTER_LABELS), width=10, state="readonly")
        combo.pack(side="left", padx=10)
        combo.bind("<<ComboboxSelected>>", self.on_filter_change)
        ttk.Button(top, text="Load", command=self.reload).pack(side="left")
        ttk.Button(top, text="Export to Excel", command=self.export_excel).pack(side="right")

        box = ttk.LabelFrame(tab, text="Clients")
        box.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        cols = ("id", "nombre", "ciudad", "tipo")
        self.tree = ttk.Treeview(box, columns=cols, show="headings", height=14)
        heads = {"id": "ID", "nombre": "Name", "ciudad": "City", "tipo": "Type"}
        widths = {"id": 70, "nombre": 320, "ciudad": 220, "tipo": 110}
        for c in cols:
            self.tree.heading(c, text=heads[c])
            self.tree.column(c, width=widths[c], anchor="w")
        self.tree.pack(fill="both", expand=True, padx=10, pady=10)

        btnrow = ttk.Frame(box)
        btnrow.pack(fill="x", padx=10, pady=(0, 10))
        ttk.Button(btnrow, text="✎ Edit selected", command=self.on_edit).pack(side="left")
        ttk.Button(btnrow, text="🗑 Deactivate selected", command=self.on_delete).pack(side="left", padx=10)

        form = ttk.LabelFrame(tab, text="Client")
        form.pack(fill="x", padx=10, pady=(0, 10))
        ttk.Label(form, textvariable=self.form_title, style="Title.TLabel")\
            .grid(row=0, column=0, columnspan=4, sticky="w", padx=10, pady=(8, 4))

        ttk.Label(form, text="Name").grid(row=1, column=0, sticky="w", padx=10, pady=4)
        self.nombre_e = ttk.Entry(form, width=30)
        self.nombre_e.grid(row=1, column=1, sticky="ew", padx=10, pady=4)

        ttk.Label(form, text="City").grid(row=1, column=2, sticky="w", padx=10, pady=4)
        self.ciudad_e = ttk.Entry(form, width=24)
        self.ciudad_e.grid(row=1, column=3, sticky="ew", padx=10, pady=4)

        ttk.Label(form, text="Type").grid(row=2, column=0, sticky="w", padx=10, pady=4)
        ttk.Combobox(form, textvariable=self.type_var, values=list(CLIENT_TYPES.values()), width=10, state="readonly")\
            .grid(row=2, column=1, sticky="w", padx=10, pady=4)

        self.submit_btn = ttk.Button(form, text="Register client", style="Big.TButton", command=self.on_submit)
        self.submit_btn.grid(row=3, column=0, columnspan=2, sticky="ew", padx=10, pady=(6, 10))
        ttk.Button(form, text="Clear", command=self.on_clear).grid(row=3, column=2, sticky="w", padx=10, pady=(6, 10))
        form.columnconfigure(1, weight=1)
        form.columnconfigure(3, weight=1)

    # ---------- state -> widgets ----------
    def render(self):
        self.error_var.set(self.screen.error)

        for item in self.tree.get_children():
            self.tree.delete(item)
        self._records = {}
        for c in self.screen.clients:
            iid = self.tree.insert("", "end", values=(c.get("id"), c.get("nombre"), c.get("ciudad"), client_type_label(c.get("tipo"))))
            self._records[iid] = c

    def _render_form(self):
        d = self.screen.draft
        for entry, value in ((self.nombre_e, d.nombre), (self.ciudad_e, d.ciudad)):
            entry.delete(0, tk.END)
            entry.insert(0, value)
        self.type_var.set(client_type_label(d.tipo))
        label = "Update client" if d.id else "Register client"
        self.form_title.set("Edit client" if d.id else "Register client")
        self.submit_btn.config(text=label)

    def _collect_form(self):
        self.screen.update_draft(
            nombre=self.nombre_e.get(),
            ciudad=self.ciudad_e.get(),
            tipo=client_type_value(self.type_var.get(), self.screen.draft.tipo),
        )

    def _selected(self) -> dict | None:
        sel = self.tree.selection()
        if not sel:
            self.app.toast("Select a client.", kind="warn")
            return None
        return self._records.get(sel[0])

    # ---------- actions ----------
    def reload(self):
        self.screen.load()
        self.render()

    def on_filter_change(self, _evt=None):
        self.screen.set_filter(FILTER_LABELS.get(self.filter_var.get(), "all"))
        self.render()

    def on_edit(self):
        record = self._selected()
        if record is None:
            return
        self.screen.edit(record)
        self._render_form()

    def on_clear(self):
        self.screen.reset_draft()
        self._render_form()

    def on_submit(self):
        self._collect_form()
        if self.screen.submit():
            self.app.toast("Client saved.", kind="success")
        self.render()
        self._render_form()

    def on_delete(self):
        record = self._selected()
        if record is None:
            return
        if self.screen.delete(record.get("id")):
            self.app.toast("Client deactivated.", kind="success")
        self.render()

    def export_excel(self):
        path = self.app.ask_export_path("clients")
        if not path:
            return
        try:
            self.app.excel.export_clients(path, self.screen.clients)
            self.app.toast("Clients exported.", kind="success")
        except Exception as e:
            self.app.handle_error("Export error", e, "Excel export failed.")
