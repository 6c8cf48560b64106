# coinkard/utils/navigation.py
import os
from dataclasses import dataclass

import streamlit as st

from utils.config_loader import PROJECT_ROOT


@dataclass(frozen=True)
class View:
    path: str
    title: str
    icon: str
    script: str

    @property
    def url_path(self):
        # st.Page wants the path without the leading slash; "" is the root view.
        return self.path.strip("/")

    @property
    def is_default(self):
        return self.path == "/"


VIEWS = (
    View(path="/", title="Browse Assets", icon="🛒", script="pages/1_🛒_Browse_Assets.py"),
    View(path="/history", title="Transaction History", icon="📜", script="pages/2_📜_Transaction_History.py"),
)


def build_pages():
    pages = []
    for view in VIEWS:
        script = os.path.join(PROJECT_ROOT, view.script)
        if view.is_default:
            pages.append(st.Page(script, title=view.title, icon=view.icon, default=True))
        else:
            pages.append(st.Page(script, title=view.title, icon=view.icon, url_path=view.url_path))
    return pages
