from semantic_apps import app, br, counter_button, div, icon, span, update_action_button
from semantic_apps.widgets import action_button

ui = div(
    counter_button("counter", "My Counter Button", icon=icon("world"), value=1200, size="big", color="purple"),
    br(),
    counter_button("thousands", "Thousands", value=999, separator=","),
    br(),
    action_button("rename", "Rename counter", icon=icon("edit")),
    span(id="clicks"),
)


def server(session):
    def on_counter(clicks):
        print(f"counter clicked {clicks} times")

    def on_rename(clicks):
        update_action_button(session, "counter", label=f"Renamed {clicks}x", icon=icon("calendar"))

    session.observe_input("counter", on_counter)
    session.observe_input("rename", on_rename)


app = app(ui, server, title="Counter buttons", dev=True)

if __name__ == "__main__":
    app.run()
