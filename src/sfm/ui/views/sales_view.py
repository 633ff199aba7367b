from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox


class SalesView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.screen = app.sales
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Sales")

        self.error_var = tk.StringVar(value="")
        self.cliente_var = tk.StringVar(value="")
        self.fecha_var = tk.StringVar(value="")

        self._build()
        self._render_form()

    def _build(self):
        tab = self.frame

        ttk.Label(tab, textvariable=self.error_var, style="Error.TLabel").pack(anchor="w", padx=10, pady=(8, 0))

        reg = ttk.LabelFrame(tab, text="Register sale")
        reg.pack(fill="x", padx=10, pady=10)

        ttk.Label(reg, text="Client ID").grid(row=0, column=0, sticky="w", padx=10, pady=6)
        ttk.Entry(reg, textvariable=self.cliente_var, width=16).grid(row=0, column=1, sticky="w", padx=10, pady=6)

        ttk.Label(reg, text='Products JSON: [{"id":"1","cantidad":2,"precio":1500}, ...]')\
            .grid(row=1, column=0, columnspan=2, sticky="w", padx=10, pady=(6, 2))
        self.items_t = tk.Text(reg, width=80, height=4)
        self.items_t.grid(row=2, column=0, columnspan=2, sticky="ew", padx=10, pady=(0, 6))

        ttk.Button(reg, text="Register sale", style="Big.TButton", command=self.on_register)\
            .grid(row=3, column=0, columnspan=2, sticky="ew", padx=10, pady=(6, 10))
        reg.columnconfigure(1, weight=1)
        self.items_t.bind("<Control-Return>", lambda _e: self.on_register())

        query = ttk.LabelFrame(tab, text="Query sales")
        query.pack(fill="x", padx=10, pady=(0, 10))
        ttk.Label(query, text="Client ID").pack(side="left", padx=(10, 4), pady=8)
        ttk.Entry(query, textvariable=self.cliente_var, width=12).pack(side="left", padx=4)
        ttk.Label(query, text="Date (YYYY-MM-DD)").pack(side="left", padx=(14, 4))
        ttk.Entry(query, textvariable=self.fecha_var, width=12).pack(side="left", padx=4)
        ttk.Button(query, text="Query", command=self.on_query).pack(side="left", padx=10)
        ttk.Button(query, text="Export to Excel", command=self.export_excel).pack(side="right", padx=10)

        box = ttk.LabelFrame(tab, text="Results")
        box.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        cols = ("venta", "producto", "cantidad", "subtotal", "fecha")
        self.tree = ttk.Treeview(box, columns=cols, show="headings", height=10)
        heads = {"venta": "Sale ID", "producto": "Product ID", "cantidad": "Qty", "subtotal": "Subtotal", "fecha": "Date"}
        widths = {"venta": 90, "producto": 100, "cantidad": 80, "subtotal": 120, "fecha": 200}
        for c in cols:
            self.tree.heading(c, text=heads[c])
            self.tree.column(c, width=widths[c], anchor="w")
        self.tree.pack(fill="both", expand=True, padx=10, pady=10)

    # ---------- state -> widgets ----------
    def render(self):
        self.error_var.set(self.screen.error)

        for item in self.tree.get_children():
            self.tree.delete(item)
        for v in self.screen.results:
            self.tree.insert("", "end", values=(
                v.get("ventaId"), v.get("productoId"), v.get("cantidad"), v.get("subtotal"), str(v.get("fecha", ""))[:10]
            ))

    def _render_form(self):
        d = self.screen.draft
        self.cliente_var.set(d.cliente_id)
        self.fecha_var.set(d.fecha)
        self.items_t.delete("1.0", "end")
        self.items_t.insert("1.0", d.items)

    def _collect_form(self):
        self.screen.update_draft(
            cliente_id=self.cliente_var.get(),
            items=self.items_t.get("1.0", "end").strip(),
            fecha=self.fecha_var.get(),
        )

    # ---------- actions ----------
    def on_register(self):
        self._collect_form()
        if self.screen.register_sale():
            messagebox.showinfo("OK", self.screen.notice, parent=self.frame)
            self.app.toast(self.screen.notice, kind="success")
        self.render()
        self._render_form()
        return "break"

    def on_query(self):
        self._collect_form()
        self.screen.query()
        self.render()

    def export_excel(self):
        path = self.app.ask_export_path("sales")
        if not path:
            return
        try:
            self.app.excel.export_sales_results(path, self.screen.results)
            self.app.toast("Sales exported.", kind="success")
        except Exception as e:
            self.app.handle_error("Export error", e, "Excel export failed.")
