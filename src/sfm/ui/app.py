from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox, filedialog
from datetime import date
import logging

from sfm.ui.views.clients_view import ClientsView
from sfm.ui.views.products_view import ProductsView
from sfm.ui.views.sales_view import SalesView

log = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, container):
        super().__init__()
        self.title("Storefront Manager")
        self.geometry("1100x680")
        self.minsize(960, 600)

        self.container = container
        self.clients = container.clients
        self.products = container.products
        self.sales = container.sales
        self.excel = container.excel
        self.app_config = container.config

        # UI state
        self.status_var = tk.StringVar(value="")
        self._toast_after_id = None

        self._build_styles()
        self._build_topbar()

        self.nb = ttk.Notebook(self)
        self.nb.pack(fill="both", expand=True, padx=12, pady=(0, 8))

        self.clients_view = ClientsView(self.nb, self)
        self.products_view = ProductsView(self.nb, self)
        self.sales_view = SalesView(self.nb, self)

        self._build_status_bar()

        # Clients is the first tab, so its list loads right away
        self.clients_view.reload()
        self.products_view.reload()
        self.toast("Ready.", kind="info", ms=1200)

    def _build_styles(self):
        style = ttk.Style(self)
        style.configure("Big.TButton", padding=(14, 8))
        style.configure("Error.TLabel", foreground="#dc2626")
        style.configure("Title.TLabel", font=("Segoe UI", 12, "bold"))

    def _build_topbar(self):
        top = ttk.Frame(self)
        top.pack(fill="x", padx=12, pady=10)
        ttk.Label(top, text="Storefront Manager", style="Title.TLabel").pack(side="left")
        ttk.Label(top, text=f"API: {self.app_config.api_base_url}").pack(side="right")

    def _build_status_bar(self):
        bar = ttk.Frame(self)
        bar.pack(fill="x", padx=12, pady=(0, 10))
        ttk.Label(bar, textvariable=self.status_var).pack(side="left")
        ttk.Label(bar, text=f"Logs: {self.app_config.paths.logs_dir}").pack(side="right")

    def toast(self, msg: str, kind: str = "info", ms: int = 2500):
        prefix = {"info": "ℹ ", "success": "✅ ", "warn": "⚠ ", "error": "❌ "}.get(kind, "")
        self.status_var.set(prefix + msg)
        if self._toast_after_id is not None:
            self.after_cancel(self._toast_after_id)
        self._toast_after_id = self.after(ms, lambda: self.status_var.set(""))

    def handle_error(self, title: str, exc: Exception, fallback: str):
        log.exception("%s: %s", title, exc)
        messagebox.showerror(title, f"{fallback}\n\n{exc}", parent=self)
        self.toast(fallback, kind="error")

    def ask_export_path(self, name: str) -> str:
        return filedialog.asksaveasfilename(
            title="Save as",
            defaultextension=".xlsx",
            filetypes=[("Excel files", "*.xlsx")],
            initialdir=str(self.app_config.paths.exports_dir),
            initialfile=f"{name}_{date.today().isoformat()}.xlsx",
        )
