"""Interface Tkinter principale."""

from __future__ import annotations

import tkinter as tk
from concurrent.futures import Future
from tkinter import messagebox, ttk
from typing import Callable

import sv_ttk
from PIL import ImageTk

from meetup.config import HOME_ROUTE, LOGIN_ROUTE, ConfigError
from meetup.logger import get_logger
from meetup.logout import LogoutProtocol, LogoutResult
from meetup.services import (
    IdentityServiceError,
    LocalMeetingService,
    SpotifyIdentityProvider,
    format_elapsed,
)
from meetup.session_view import SessionView
from meetup.state import OverlayState
from meetup.ui.avatar import AVATAR_SIZE, render_avatar
from meetup.ui.dispatch import TkDispatcher
from meetup.ui.navigation import FrameNavigator

logger = get_logger(__name__)

BACKGROUND_COLOR = "#F9FAFB"
CARD_COLOR = "#FFFFFF"
TEXT_COLOR = "#111827"
MUTED_COLOR = "#6B7280"
WINDOW_MIN_WIDTH = 900
WINDOW_MIN_HEIGHT = 600
RECENT_COLUMNS = 3


class MainWindow:
    """Fenêtre principale : écran de connexion et tableau de bord."""

    def __init__(
        self,
        identity_provider: SpotifyIdentityProvider,
        meeting_service: LocalMeetingService,
    ) -> None:
        self._identity_provider = identity_provider
        self._meetings = meeting_service

        self.root = tk.Tk()
        self.root.title("MeetUp")
        self.root.geometry(f"{WINDOW_MIN_WIDTH}x{WINDOW_MIN_HEIGHT}")
        self.root.minsize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        sv_ttk.set_theme("light")
        self.root.configure(bg=BACKGROUND_COLOR)
        self._configure_styles()

        self._dispatcher = TkDispatcher(self.root.after, self.root.after_cancel)
        self._navigator = FrameNavigator()
        self._view = SessionView(
            identity_provider,
            self._navigator,
            meeting_service,
            logout_protocol=LogoutProtocol(dispatch=self._dispatcher.post),
        )

        self._display_name_var = tk.StringVar()
        self._identity_var = tk.StringVar()
        self._welcome_var = tk.StringVar()
        self._login_status_var = tk.StringVar(value="Non connecté")
        self._avatar_photo: ImageTk.PhotoImage | None = None
        self._create_dialog: tk.Toplevel | None = None
        self._join_dialog: tk.Toplevel | None = None

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        container = ttk.Frame(self.root, style="Main.TFrame")
        container.grid(row=0, column=0, sticky="nsew")
        container.columnconfigure(0, weight=1)
        container.rowconfigure(0, weight=1)

        login_frame = self._build_login_screen(container)
        dashboard_frame = self._build_dashboard(container)

        self._navigator.register(LOGIN_ROUTE, login_frame)
        self._navigator.register(
            HOME_ROUTE,
            dashboard_frame,
            on_enter=self._enter_dashboard,
            on_leave=self._leave_dashboard,
        )

    # --------------------------------------------------------------------- UI -
    def _configure_styles(self) -> None:
        style = ttk.Style()
        style.configure("Main.TFrame", background=BACKGROUND_COLOR)
        style.configure("Header.TFrame", background=CARD_COLOR)
        style.configure("Card.TFrame", background=CARD_COLOR)
        style.configure(
            "Brand.TLabel",
            background=CARD_COLOR,
            foreground=TEXT_COLOR,
            font=("Helvetica", 18, "bold"),
        )
        style.configure(
            "Title.TLabel",
            background=BACKGROUND_COLOR,
            foreground=TEXT_COLOR,
            font=("Helvetica", 22, "bold"),
        )
        style.configure(
            "Section.TLabel",
            background=BACKGROUND_COLOR,
            foreground=TEXT_COLOR,
            font=("Helvetica", 15, "bold"),
        )
        style.configure("Profile.TLabel", background=CARD_COLOR, foreground=TEXT_COLOR)
        style.configure("CardTitle.TLabel", background=CARD_COLOR, font=("Helvetica", 12, "bold"))
        style.configure("Muted.TLabel", background=CARD_COLOR, foreground=MUTED_COLOR)
        style.configure("Status.TLabel", background=BACKGROUND_COLOR, foreground=MUTED_COLOR)
        style.configure("Accent.TButton", font=("Helvetica", 11, "bold"))
        style.configure("TButton", padding=(16, 8))
        self.root.option_add("*Font", "Helvetica 11")

    def _build_login_screen(self, parent: tk.Misc) -> ttk.Frame:
        frame = ttk.Frame(parent, style="Main.TFrame", padding=48)
        frame.grid(row=0, column=0, sticky="nsew")
        frame.columnconfigure(0, weight=1)

        ttk.Label(frame, text="📹 MeetUp", style="Title.TLabel").grid(row=0, column=0, pady=(80, 8))
        ttk.Label(
            frame,
            textvariable=self._login_status_var,
            style="Status.TLabel",
        ).grid(row=1, column=0, pady=(0, 24))
        ttk.Button(
            frame,
            text="Connexion",
            command=self.authenticate,
            style="Accent.TButton",
        ).grid(row=2, column=0)
        return frame

    def _build_dashboard(self, parent: tk.Misc) -> ttk.Frame:
        frame = ttk.Frame(parent, style="Main.TFrame")
        frame.grid(row=0, column=0, sticky="nsew")
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(1, weight=1)

        self._build_header(frame)
        self._build_main_area(frame)
        self._build_profile_menu(frame)
        return frame

    def _build_header(self, parent: tk.Misc) -> None:
        header = ttk.Frame(parent, style="Header.TFrame", padding=(24, 12))
        header.grid(row=0, column=0, sticky="ew")
        header.columnconfigure(0, weight=1)
        self._header = header

        ttk.Label(header, text="📹 MeetUp", style="Brand.TLabel").grid(row=0, column=0, sticky="w")

        profile = ttk.Frame(header, style="Header.TFrame", cursor="hand2")
        profile.grid(row=0, column=1, sticky="e")
        self._avatar_label = ttk.Label(profile, style="Profile.TLabel")
        self._avatar_label.grid(row=0, column=0, padx=(0, 8))
        name_label = ttk.Label(profile, textvariable=self._display_name_var, style="Profile.TLabel")
        name_label.grid(row=0, column=1)
        chevron = ttk.Label(profile, text="▾", style="Profile.TLabel")
        chevron.grid(row=0, column=2, padx=(6, 0))
        for widget in (profile, self._avatar_label, name_label, chevron):
            widget.bind("<Button-1>", lambda _: self.toggle_profile_menu())

    def _build_profile_menu(self, parent: tk.Misc) -> None:
        menu = ttk.Frame(parent, style="Card.TFrame", padding=(12, 8), relief=tk.RAISED)
        menu.columnconfigure(0, weight=1)
        ttk.Label(menu, textvariable=self._identity_var, style="Muted.TLabel").grid(
            row=0, column=0, sticky="w", pady=(0, 6)
        )
        ttk.Button(menu, text="Paramètres", state=tk.DISABLED).grid(row=1, column=0, sticky="ew")
        ttk.Separator(menu).grid(row=2, column=0, sticky="ew", pady=6)
        self._logout_button = ttk.Button(menu, text="Déconnexion", command=self.logout)
        self._logout_button.grid(row=3, column=0, sticky="ew")
        self._profile_menu = menu

    def _build_main_area(self, parent: tk.Misc) -> None:
        main = ttk.Frame(parent, style="Main.TFrame", padding=(24, 32))
        main.grid(row=1, column=0, sticky="nsew")
        main.columnconfigure(0, weight=1)

        ttk.Label(main, textvariable=self._welcome_var, style="Title.TLabel").grid(row=0, column=0, pady=(0, 24))

        actions = ttk.Frame(main, style="Main.TFrame")
        actions.grid(row=1, column=0)
        ttk.Button(
            actions,
            text="＋ Nouvelle réunion",
            command=self.toggle_create_modal,
            style="Accent.TButton",
        ).grid(row=0, column=0, padx=12)
        ttk.Button(
            actions,
            text="🔗 Rejoindre une réunion",
            command=self.toggle_join_modal,
        ).grid(row=0, column=1, padx=12)

        ttk.Label(main, text="Réunions récentes", style="Section.TLabel").grid(row=2, column=0, pady=(48, 16))
        self._recent_frame = ttk.Frame(main, style="Main.TFrame")
        self._recent_frame.grid(row=3, column=0, sticky="ew")
        for column in range(RECENT_COLUMNS):
            self._recent_frame.columnconfigure(column, weight=1, uniform="recent")

    def _open_meeting_dialog(
        self,
        title: str,
        field_label: str,
        submit_text: str,
        on_submit: Callable[[ttk.Entry], None],
        on_cancel: Callable[[], None],
    ) -> tk.Toplevel:
        dialog = tk.Toplevel(self.root)
        dialog.title(title)
        dialog.transient(self.root)
        dialog.resizable(False, False)
        dialog.protocol("WM_DELETE_WINDOW", on_cancel)

        body = ttk.Frame(dialog, style="Card.TFrame", padding=24)
        body.grid(row=0, column=0, sticky="nsew")
        body.columnconfigure(0, weight=1)
        ttk.Label(body, text=title, style="CardTitle.TLabel").grid(row=0, column=0, columnspan=2, sticky="w")
        ttk.Label(body, text=field_label, style="Muted.TLabel").grid(
            row=1, column=0, columnspan=2, sticky="w", pady=(16, 4)
        )
        entry = ttk.Entry(body, width=40)
        entry.grid(row=2, column=0, columnspan=2, sticky="ew")
        entry.bind("<Return>", lambda _: on_submit(entry))

        buttons = ttk.Frame(body, style="Card.TFrame")
        buttons.grid(row=3, column=0, columnspan=2, sticky="e", pady=(20, 0))
        ttk.Button(buttons, text="Annuler", command=on_cancel).grid(row=0, column=0, padx=(0, 8))
        ttk.Button(
            buttons,
            text=submit_text,
            command=lambda: on_submit(entry),
            style="Accent.TButton",
        ).grid(row=0, column=1)

        dialog.grab_set()
        entry.focus_set()
        return dialog

    # -------------------------------------------------------------- Rendu état -
    def _render_overlays(self) -> None:
        """Aligne les widgets sur l'overlay actif de la vue."""
        overlay = self._view.overlay

        if overlay is OverlayState.PROFILE_MENU:
            self._profile_menu.place(in_=self._header, relx=1.0, rely=1.0, x=-24, anchor="ne")
            self._profile_menu.lift()
        else:
            self._profile_menu.place_forget()

        if overlay is OverlayState.CREATE_MODAL and self._create_dialog is None:
            self._create_dialog = self._open_meeting_dialog(
                "Nouvelle réunion",
                "Nom de la réunion",
                "Créer",
                self._submit_create,
                self.close_create_modal,
            )
        elif overlay is not OverlayState.CREATE_MODAL and self._create_dialog is not None:
            self._create_dialog.destroy()
            self._create_dialog = None

        if overlay is OverlayState.JOIN_MODAL and self._join_dialog is None:
            self._join_dialog = self._open_meeting_dialog(
                "Rejoindre une réunion",
                "Code de la réunion",
                "Rejoindre",
                self._submit_join,
                self.close_join_modal,
            )
        elif overlay is not OverlayState.JOIN_MODAL and self._join_dialog is not None:
            self._join_dialog.destroy()
            self._join_dialog = None

    def _render_identity(self) -> None:
        self._display_name_var.set(self._view.display_name)
        self._identity_var.set(self._view.identity or "")
        self._welcome_var.set(f"Bienvenue, {self._view.display_name}")
        self._avatar_photo = ImageTk.PhotoImage(render_avatar(self._view.avatar_initial, AVATAR_SIZE))
        self._avatar_label.configure(image=self._avatar_photo)

    def _render_recent(self) -> None:
        for child in self._recent_frame.winfo_children():
            child.destroy()

        meetings = self._meetings.recent()
        if not meetings:
            ttk.Label(
                self._recent_frame,
                text="Aucune réunion récente",
                style="Status.TLabel",
            ).grid(row=0, column=0, columnspan=RECENT_COLUMNS)
            return

        for index, meeting in enumerate(meetings):
            card = ttk.Frame(self._recent_frame, style="Card.TFrame", padding=16)
            card.grid(row=index // RECENT_COLUMNS, column=index % RECENT_COLUMNS, sticky="nsew", padx=8, pady=8)
            card.columnconfigure(0, weight=1)
            ttk.Label(card, text=f"👥 {meeting.title}", style="CardTitle.TLabel").grid(row=0, column=0, sticky="w")
            ttk.Label(card, text=format_elapsed(meeting.created_at), style="Muted.TLabel").grid(
                row=0, column=1, sticky="e"
            )
            ttk.Label(card, text=f"Code : {meeting.code}", style="Muted.TLabel").grid(
                row=1, column=0, columnspan=2, sticky="w", pady=(8, 12)
            )
            ttk.Button(
                card,
                text="Rejoindre",
                command=lambda code=meeting.code: self.rejoin(code),
            ).grid(row=2, column=0, sticky="w")

    # --------------------------------------------------------------- Callbacks -
    def _enter_dashboard(self) -> None:
        self._view.mount()
        self._render_identity()
        self._render_overlays()
        self._render_recent()

    def _leave_dashboard(self) -> None:
        self._view.unmount()
        self._render_overlays()

    def authenticate(self) -> None:
        try:
            self._identity_provider.authenticate()
        except ConfigError as exc:
            logger.warning("Connexion impossible : %s", exc)
            messagebox.showwarning("Identifiants manquants", str(exc))
            self._login_status_var.set("Identifiants absents")
            return
        except IdentityServiceError as exc:
            logger.exception("Échec de la connexion")
            messagebox.showerror("Erreur d'authentification", f"Impossible de se connecter : {exc}")
            self._login_status_var.set("Échec de la connexion")
            return

        self._login_status_var.set("Non connecté")
        self._navigator.go_to(HOME_ROUTE)

    def toggle_profile_menu(self) -> None:
        self._view.toggle_profile_menu()
        self._render_overlays()

    def toggle_create_modal(self) -> None:
        self._view.toggle_create_modal()
        self._render_overlays()

    def toggle_join_modal(self) -> None:
        self._view.toggle_join_modal()
        self._render_overlays()

    def close_create_modal(self) -> None:
        self._view.close_create_modal()
        self._render_overlays()

    def close_join_modal(self) -> None:
        self._view.close_join_modal()
        self._render_overlays()

    def _submit_create(self, entry: ttk.Entry) -> None:
        if not self._view.submit_create(entry.get()):
            messagebox.showwarning("Nom manquant", "Saisissez un nom de réunion.", parent=entry)
            entry.focus_set()
            return
        self._render_overlays()
        self._render_recent()

    def _submit_join(self, entry: ttk.Entry) -> None:
        if not self._view.submit_join(entry.get()):
            messagebox.showwarning("Code manquant", "Saisissez le code de la réunion.", parent=entry)
            entry.focus_set()
            return
        self._render_overlays()
        self._render_recent()

    def rejoin(self, code: str) -> None:
        if self._view.submit_join(code):
            self._render_recent()

    def logout(self) -> None:
        """Déconnecte l'utilisateur ; l'écran ne change qu'en cas de succès."""
        if self._view.is_logging_out:
            return
        self._logout_button.configure(state=tk.DISABLED, text="Déconnexion…")
        outcome = self._view.logout()
        outcome.add_done_callback(self._on_logout_done)

    def _on_logout_done(self, outcome: Future[LogoutResult]) -> None:
        self._logout_button.configure(state=tk.NORMAL, text="Déconnexion")
        result = outcome.result()
        if not result.ok:
            messagebox.showerror("Déconnexion impossible", str(result.error))

    def _on_close(self) -> None:
        self._dispatcher.stop()
        self._identity_provider.shutdown()
        self.root.destroy()

    # ----------------------------------------------------------------- Public -
    def run(self) -> None:
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._dispatcher.start()
        identity = self._identity_provider.try_authenticate_from_cache()
        self._navigator.go_to(HOME_ROUTE if identity else LOGIN_ROUTE)
        self.root.mainloop()
