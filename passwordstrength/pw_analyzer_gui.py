#!/usr/bin/env python3
"""
pw_analyzer_gui.py

Password Strength Simulator — Tkinter GUI

Features:
- Real-time entropy estimate and strength label
- Estimated crack times for each attacker tier
- Improvement suggestions
- Optional "Sanitized Report" export (does NOT save the raw password)

Security notes:
- Educational tool. Do not type real passwords.
- This script intentionally does NOT log or store raw passwords.
"""

import json
import logging
import random
import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from .passwordchecker import ATTACKER_TIERS, analyze, sanitized_report

logger = logging.getLogger(__name__)

# progress bar is full at the "very strong" threshold
FULL_BAR_BITS = 80

PASSPHRASE_WORDS = [
    "battery", "staple", "river", "keyboard", "orange", "planet",
    "window", "coffee", "guitar", "museum", "crystal", "forest",
]


def strength_percent(bits: float) -> float:
    if bits <= 0:
        return 0
    return min(100, (bits / FULL_BAR_BITS) * 100)


# -------------------------
# GUI
# -------------------------
class PWAnalyzerGUI(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Password Strength Simulator")
        self.geometry("680x560")
        self.resizable(False, False)
        self.create_widgets()

    def create_widgets(self):
        pad = {"padx": 8, "pady": 6}

        # Input frame
        frm_in = ttk.LabelFrame(self, text="Example password (local only, not stored)")
        frm_in.pack(fill="x", **pad)
        self.pw_var = tk.StringVar()
        pw_entry = ttk.Entry(frm_in, textvariable=self.pw_var, show="*", font=("Segoe UI", 11))
        pw_entry.pack(fill="x", padx=10, pady=8)
        pw_entry.bind("<KeyRelease>", lambda e: self.update_analysis())

        self.show_var = tk.BooleanVar(value=False)
        cb = ttk.Checkbutton(frm_in, text="Show password", variable=self.show_var,
                             command=lambda: self.toggle_show(pw_entry))
        cb.pack(anchor="w", padx=10, pady=(0, 8))

        # Strength frame
        frm_str = ttk.Frame(self)
        frm_str.pack(fill="x", padx=12)
        ttk.Label(frm_str, text="Entropy (bits):").grid(row=0, column=0, sticky="w")
        self.entropy_lbl = ttk.Label(frm_str, text="0.0")
        self.entropy_lbl.grid(row=0, column=1, sticky="w", padx=(6, 0))

        ttk.Label(frm_str, text="Strength:").grid(row=0, column=2, sticky="w", padx=(18, 0))
        self.str_lbl = ttk.Label(frm_str, text="—")
        self.str_lbl.grid(row=0, column=3, sticky="w", padx=(6, 0))

        self.str_bar = ttk.Progressbar(frm_str, orient="horizontal", length=400,
                                       mode="determinate", maximum=100)
        self.str_bar.grid(row=1, column=0, columnspan=4, pady=(8, 0), sticky="w")

        # Crack times, one row per attacker tier
        frm_times = ttk.LabelFrame(self, text="Estimated crack times")
        frm_times.pack(fill="x", padx=12, pady=(8, 0))
        self.time_lbls = {}
        for row, tier in enumerate(ATTACKER_TIERS):
            ttk.Label(frm_times, text=f"{tier.name}:").grid(row=row, column=0, sticky="w", padx=8)
            lbl = ttk.Label(frm_times, text="—")
            lbl.grid(row=row, column=1, sticky="w", padx=8)
            self.time_lbls[tier.name] = lbl

        # Details and suggestions
        frm_checks = ttk.LabelFrame(self, text="Details & recommendations")
        frm_checks.pack(fill="both", expand=True, padx=12, pady=(8, 0))
        self.checks_text = tk.Text(frm_checks, height=10, wrap="word", state="disabled", padx=8, pady=6)
        self.checks_text.pack(fill="both", expand=True)

        # Buttons
        btn_frame = ttk.Frame(self)
        btn_frame.pack(fill="x", padx=12, pady=10)
        ttk.Button(btn_frame, text="Sanitized Report (export)", command=self.export_report).pack(side="left")
        ttk.Button(btn_frame, text="Example: Generate Passphrase", command=self.example_passphrase).pack(side="left", padx=(8, 0))
        ttk.Button(btn_frame, text="About / Notes", command=self.show_about).pack(side="right")

        self.update_analysis()

    def toggle_show(self, entry):
        if self.show_var.get():
            entry.config(show="")
        else:
            entry.config(show="*")

    def update_analysis(self):
        # full recompute on every edit, nothing cached between keystrokes
        result = analyze(self.pw_var.get())

        self.checks_text.config(state="normal")
        self.checks_text.delete("1.0", "end")
        if result is None:
            self.entropy_lbl.config(text="0.0")
            self.str_lbl.config(text="—")
            self.str_bar["value"] = 0
            for lbl in self.time_lbls.values():
                lbl.config(text="—")
            self.checks_text.insert("end", "No password entered. Try typing an example or use 'Generate Passphrase'.\n")
            self.checks_text.config(state="disabled")
            return

        self.entropy_lbl.config(text=f"{result.entropy_bits:.1f}")
        self.str_lbl.config(text=result.strength.label)
        self.str_bar["value"] = strength_percent(result.entropy_bits)
        for name, lbl in self.time_lbls.items():
            lbl.config(text=result.crack_times[name])

        self.checks_text.insert("end", f"Length: {result.length} characters\n")
        self.checks_text.insert("end", f"Character set size: {result.charset_size} possible chars\n")
        self.checks_text.insert("end", f"Total combinations: {result.guess_space}\n\n")
        self.checks_text.insert("end", "Recommendations:\n")
        for s in result.suggestions:
            self.checks_text.insert("end", f" - {s}\n")
        self.checks_text.insert("end", "\nSecurity note: This GUI does not transmit or save your raw password.\n")
        self.checks_text.config(state="disabled")

    def export_report(self):
        rep = sanitized_report(self.pw_var.get())
        if rep is None:
            messagebox.showinfo("Export", "No password entered; nothing to export.")
            return

        fpath = filedialog.asksaveasfilename(
            defaultextension=".json",
            filetypes=[("JSON files", "*.json"), ("Text files", "*.txt")],
            title="Save sanitized report"
        )
        if not fpath:
            return
        try:
            with open(fpath, "w", encoding="utf-8") as fh:
                json.dump(rep, fh, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error("Could not save report to %s: %s", fpath, e)
            messagebox.showerror("Export error", f"Could not save file: {e}")
            return
        messagebox.showinfo("Export", f"Sanitized report saved to:\n{fpath}")

    def example_passphrase(self):
        pw = "-".join(random.sample(PASSPHRASE_WORDS, 4))
        # don't auto-populate the main field, keep the UX explicit
        answer = messagebox.askyesno("Generated Passphrase",
                                     f"Example passphrase:\n\n{pw}\n\nWould you like to copy it into the password field?")
        if answer:
            self.pw_var.set(pw)
            self.update_analysis()

    def show_about(self):
        messagebox.showinfo("About / Notes",
            "Password Strength Simulator GUI\n\n"
            "Estimates brute-force entropy and crack times for several attacker speeds.\n"
            "Crack times assume the attacker searches half the space on average.\n"
            "It does NOT store or transmit your raw password."
        )


# -------------------------
# Run
# -------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = PWAnalyzerGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
