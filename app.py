import gradio as gr

from json_path_toolkit.config import load_settings
from json_path_toolkit.handlers import (
    file_lookup_handler,
    load_document_handler,
    lookup_value_handler,
    normalize_path_handler,
    prepare_file_handler,
    preview_values_handler,
)
from json_path_toolkit.logger import setup_logger

settings = load_settings()
setup_logger(settings.verbosity)

# --- UI Definition ---
with gr.Blocks(title="JSON Path Toolkit") as demo:
    gr.Markdown("# JSON Path Toolkit")
    gr.Markdown("Look up values in JSON documents with simple selectors, and prepare file locations on disk.")

    # State
    json_data_state = gr.State()

    with gr.Tab("Value Lookup"):
        with gr.Row():
            # Left Panel: Input
            with gr.Column(scale=1):
                gr.Markdown("### 1. Import")
                file_input = gr.File(label="Upload JSON File", file_types=[".json"])
                status_msg = gr.Textbox(label="Status", interactive=False)

                gr.Markdown("### 2. Select")
                selector_input = gr.Dropdown(
                    label="Selector (e.g. profile.name, items[0].id; empty for whole document)",
                    choices=[],
                    value=None,
                    allow_custom_value=True,
                    interactive=True,
                )
                default_input = gr.Textbox(label="Default Value", value=settings.default_value)
                lookup_btn = gr.Button("Look Up", variant="primary")

            # Right Panel: Result
            with gr.Column(scale=1):
                gr.Markdown("### 3. Result")
                lookup_status = gr.Textbox(label="Lookup Status", interactive=False)
                lookup_output = gr.Textbox(label="Flattened Value", interactive=False, lines=4)

                gr.Markdown("### 4. Preview several selectors")
                selectors_text = gr.Textbox(label="Selectors (one per line)", lines=4)
                preview_btn = gr.Button("Load Preview")
                values_preview = gr.JSON(label="Preview")

        file_input.upload(
            fn=load_document_handler,
            inputs=[file_input],
            outputs=[json_data_state, selector_input, status_msg],
        )

        lookup_btn.click(
            fn=lookup_value_handler,
            inputs=[json_data_state, selector_input, default_input],
            outputs=[lookup_status, lookup_output],
        )

        preview_btn.click(
            fn=preview_values_handler,
            inputs=[json_data_state, selectors_text],
            outputs=[values_preview],
        )

    with gr.Tab("File Lookup"):
        gr.Markdown("Read a value from a JSON file on disk. Missing files and invalid JSON return the default.")
        with gr.Row():
            with gr.Column():
                disk_path = gr.Textbox(label="JSON File Path", placeholder="config.json")
                disk_selector = gr.Textbox(label="Selector", placeholder="profile.name")
                disk_default = gr.Textbox(label="Default Value", value=settings.default_value)
                disk_btn = gr.Button("Read Value", variant="primary")
            with gr.Column():
                disk_status = gr.Textbox(label="Status", interactive=False)
                disk_output = gr.Textbox(label="Flattened Value", interactive=False, lines=4)

        disk_btn.click(
            fn=file_lookup_handler,
            inputs=[disk_path, disk_selector, disk_default],
            outputs=[disk_status, disk_output],
        )

    with gr.Tab("Path Preparation"):
        gr.Markdown("### 1. Normalize a path")
        with gr.Row():
            raw_path = gr.Textbox(label="Path", placeholder='"$HOME/data/../logs/"')
            normalized_path = gr.Textbox(label="Normalized Path", interactive=False)
        normalize_btn = gr.Button("Normalize")

        gr.Markdown("### 2. Prepare a file location")
        with gr.Row():
            with gr.Column():
                file_value = gr.Textbox(label="File Name or Path", placeholder="log.txt")
                folder_value = gr.Textbox(label="Folder (optional)", value=settings.default_folder)
                prepare_btn = gr.Button("Prepare", variant="primary")
            with gr.Column():
                prepared_path = gr.Textbox(label="Prepared Path", interactive=False)
                prepare_status = gr.Textbox(label="Status", interactive=False)
                last_path = gr.Textbox(label="Last Resolved Path", interactive=False)

        normalize_btn.click(
            fn=normalize_path_handler,
            inputs=[raw_path],
            outputs=[normalized_path],
        )

        prepare_btn.click(
            fn=prepare_file_handler,
            inputs=[file_value, folder_value],
            outputs=[prepared_path, prepare_status, last_path],
        )

if __name__ == "__main__":
    demo.launch()
