from __future__ import annotations

import tkinter as tk
from tkinter import ttk


class ProductsView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.screen = app.products
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Products")

        self.error_var = tk.StringVar(value="")
        self.year_var = tk.StringVar(value="")
        self.form_title = tk.StringVar(value="Register product")
        self._records: dict[str, dict] = {}

        self._build()

    def _build(self):
        tab = self.frame

        ttk.Label(tab, textvariable=self.error_var, style="Error.TLabel").pack(anchor="w", padx=10, pady=(8, 0))

        top = ttk.Frame(tab)
        top.pack(fill="x", padx=10, pady=8)
        ttk.Button(top, text="Available", command=self.reload).pack(side="left")
        ttk.Button(top, text="Sold this week", command=self.on_recent_sold).pack(side="left", padx=10)
        ttk.Button(top, text="Total this year", command=self.on_year_count).pack(side="left")
        ttk.Button(top, text="Export to Excel", command=self.export_excel).pack(side="right")

        mid = ttk.Frame(tab)
        mid.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        box = ttk.LabelFrame(mid, text="Available products")
        box.pack(side="left", fill="both", expand=True, padx=(0, 10))

        cols = ("id", "nombre", "precio", "stock")
        self.tree = ttk.Treeview(box, columns=cols, show="headings", height=12)
        heads = {"id": "ID", "nombre": "Name", "precio": "Price", "stock": "Stock"}
        widths = {"id": 70, "nombre": 300, "precio": 110, "stock": 90}
        for c in cols:
            self.tree.heading(c, text=heads[c])
            self.tree.column(c, width=widths[c], anchor="w")
        self.tree.pack(fill="both", expand=True, padx=10, pady=10)

        # inline single-field edits for the selected row
        inline = ttk.Frame(box)
        inline.pack(fill="x", padx=10, pady=(0, 10))
        ttk.Label(inline, text="New price").grid(row=0, column=0, sticky="w")
        self.price_inline = ttk.Entry(inline, width=10)
        self.price_inline.grid(row=0, column=1, padx=6)
        ttk.Button(inline, text="💲 Set price", command=self.on_update_price).grid(row=0, column=2, padx=(0, 14))
        ttk.Label(inline, text="Add stock").grid(row=0, column=3, sticky="w")
        self.stock_inline = ttk.Entry(inline, width=8)
        self.stock_inline.grid(row=0, column=4, padx=6)
        ttk.Button(inline, text="➕ Add", command=self.on_increment_stock).grid(row=0, column=5, padx=(0, 14))
        ttk.Button(inline, text="✎ Edit", command=self.on_edit).grid(row=0, column=6)
        ttk.Button(inline, text="🗑 Disable", command=self.on_delete).grid(row=0, column=7, padx=6)

        stats = ttk.LabelFrame(mid, text="Sales stats")
        stats.pack(side="right", fill="y")
        ttk.Label(stats, text="Sold this week").pack(anchor="w", padx=10, pady=(10, 4))
        self.recent_list = tk.Listbox(stats, width=36, height=12)
        self.recent_list.pack(fill="both", expand=True, padx=10)
        ttk.Label(stats, textvariable=self.year_var).pack(anchor="w", padx=10, pady=10)

        form = ttk.LabelFrame(tab, text="Product")
        form.pack(fill="x", padx=10, pady=(0, 10))
        ttk.Label(form, textvariable=self.form_title, style="Title.TLabel")\
            .grid(row=0, column=0, columnspan=6, sticky="w", padx=10, pady=(8, 4))

        self.name_e = self._entry(form, "Name", 1, 0, 28)
        self.price_e = self._entry(form, "Price", 1, 2, 12)
        self.stock_e = self._entry(form, "Stock", 1, 4, 10)

        self.submit_btn = ttk.Button(form, text="Register product", style="Big.TButton", command=self.on_submit)
        self.submit_btn.grid(row=2, column=0, columnspan=2, sticky="ew", padx=10, pady=(6, 10))
        ttk.Button(form, text="Clear", command=self.on_clear).grid(row=2, column=2, sticky="w", padx=10, pady=(6, 10))

        for entry in (self.name_e, self.price_e, self.stock_e):
            entry.bind("<Return>", self._on_enter_submit)

    def _entry(self, parent, label, row, col, width):
        ttk.Label(parent, text=label).grid(row=row, column=col, sticky="w", padx=8, pady=4)
        e = ttk.Entry(parent, width=width)
        e.grid(row=row, column=col + 1, sticky="ew", padx=8, pady=4)
        return e

    # ---------- state -> widgets ----------
    def render(self):
        self.error_var.set(self.screen.error)

        for item in self.tree.get_children():
            self.tree.delete(item)
        self._records = {}
        for p in self.screen.products:
            iid = self.tree.insert("", "end", values=(p.get("productoID"), p.get("nombre"), p.get("precio"), p.get("stock")))
            self._records[iid] = p

        self.recent_list.delete(0, tk.END)
        for item in self.screen.recent_sold:
            self.recent_list.insert(tk.END, f"{item.get('productName')}: {item.get('quantitySold')} units")

        count = self.screen.year_count
        self.year_var.set("" if count is None else f"Total sold this year: {count} units")

    def _render_form(self):
        d = self.screen.draft
        for entry, value in ((self.name_e, d.name), (self.price_e, d.price), (self.stock_e, d.stock)):
            entry.delete(0, tk.END)
            entry.insert(0, value)
        self.form_title.set("Edit product" if d.id else "Register product")
        self.submit_btn.config(text="Update product" if d.id else "Register product")

    def _selected(self) -> dict | None:
        sel = self.tree.selection()
        if not sel:
            self.app.toast("Select a product.", kind="warn")
            return None
        return self._records.get(sel[0])

    # ---------- actions ----------
    def reload(self):
        self.screen.load_available()
        self.render()

    def on_recent_sold(self):
        self.screen.load_recent_sold()
        self.render()

    def on_year_count(self):
        self.screen.load_year_count()
        self.render()

    def _on_enter_submit(self, _event=None):
        self.on_submit()
        return "break"

    def on_submit(self):
        self.screen.update_draft(name=self.name_e.get(), price=self.price_e.get(), stock=self.stock_e.get())
        if self.screen.submit():
            self.app.toast("Product saved.", kind="success")
        self.render()
        self._render_form()

    def on_clear(self):
        self.screen.reset_draft()
        self._render_form()

    def on_edit(self):
        record = self._selected()
        if record is None:
            return
        self.screen.edit(record)
        self._render_form()

    def on_delete(self):
        record = self._selected()
        if record is None:
            return
        if self.screen.delete(record.get("productoID")):
            self.app.toast("Product disabled.", kind="success")
        self.render()

    def on_update_price(self):
        record = self._selected()
        if record is None:
            return
        if self.screen.update_price(record.get("productoID"), self.price_inline.get()):
            self.price_inline.delete(0, tk.END)
            self.app.toast("Price updated.", kind="success")
        self.render()

    def on_increment_stock(self):
        record = self._selected()
        if record is None:
            return
        if self.screen.increment_stock(record.get("productoID"), self.stock_inline.get()):
            self.stock_inline.delete(0, tk.END)
            self.app.toast("Stock incremented.", kind="success")
        self.render()

    def export_excel(self):
        path = self.app.ask_export_path("products")
        if not path:
            return
        try:
            self.app.excel.export_products(path, self.screen.products)
            self.app.toast("Products exported.", kind="success")
        except Exception as e:
            self.app.handle_error("Export error", e, "Excel export failed.")
