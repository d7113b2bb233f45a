"""dynadot_folder — folders and folder-level defaults."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx

_FOLDER = {"folderId": "folder_id"}

folder_tool = CompositeTool(
    name="dynadot_folder",
    description="Folder management: create, delete, list, configure folder-level settings",
    actions={
        "list": ActionDefinition(command="folder_list", description="List all folders"),
        "create": ActionDefinition(
            command="create_folder",
            description="Create new folder",
            params=f.shape(folderName=f.NAME),
            transform=tx.rename({"folderName": "folder_name"}),
        ),
        "delete": ActionDefinition(
            command="delete_folder",
            description="Delete folder",
            params=f.shape(folderId=f.FOLDER_ID),
            transform=tx.rename(_FOLDER),
        ),
        "rename": ActionDefinition(
            command="set_folder_name",
            description="Rename folder",
            params=f.shape(folderId=f.FOLDER_ID, folderName=f.NAME),
            transform=tx.rename({**_FOLDER, "folderName": "folder_name"}),
        ),
        "set_whois": ActionDefinition(
            command="set_folder_whois",
            description="Set WHOIS for all domains in folder",
            params=f.shape(folderId=f.FOLDER_ID, contactId=f.CONTACT_ID),
            transform=tx.rename({**_FOLDER, "contactId": "contact_id"}),
        ),
        "set_ns": ActionDefinition(
            command="set_folder_ns",
            description="Set nameservers for folder",
            params=f.shape(folderId=f.FOLDER_ID, nameservers=f.NAMESERVERS),
            transform=tx.with_list("nameservers", "ns", scope=_FOLDER),
        ),
        "set_parking": ActionDefinition(
            command="set_folder_parking",
            description="Enable parking for folder",
            params=f.shape(folderId=f.FOLDER_ID),
            transform=tx.rename(_FOLDER),
        ),
        "set_forwarding": ActionDefinition(
            command="set_folder_forwarding",
            description="Set forwarding for folder",
            params=f.shape(folderId=f.FOLDER_ID, forwardUrl=f.URL),
            transform=tx.rename({**_FOLDER, "forwardUrl": "forward_url"}),
        ),
        "set_stealth": ActionDefinition(
            command="set_folder_stealth",
            description="Set stealth forwarding for folder",
            params=f.shape(folderId=f.FOLDER_ID, stealthUrl=f.URL),
            transform=tx.rename({**_FOLDER, "stealthUrl": "stealth_url"}),
        ),
        "set_hosting": ActionDefinition(
            command="set_folder_hosting",
            description="Set hosting for folder",
            params=f.shape(folderId=f.FOLDER_ID, options=f.string_map("Hosting options")),
            transform=tx.with_map("options", _FOLDER),
        ),
        "set_dns": ActionDefinition(
            command="set_folder_dns",
            description="Set DNS for folder",
            params=f.shape(folderId=f.FOLDER_ID, mainRecords=f.MAIN_RECORDS, subdomainRecords=f.SUBDOMAIN_RECORDS),
            transform=tx.with_dns(_FOLDER),
        ),
        "set_dns2": ActionDefinition(
            command="set_folder_dns2",
            description="Set DNS2 for folder",
            params=f.shape(folderId=f.FOLDER_ID, mainRecords=f.MAIN_RECORDS, subdomainRecords=f.SUBDOMAIN_RECORDS),
            transform=tx.with_dns(_FOLDER),
        ),
        "set_email_forward": ActionDefinition(
            command="set_folder_email_forward",
            description="Set email forwarding for folder",
            params=f.shape(folderId=f.FOLDER_ID, email=f.EMAIL),
            transform=tx.rename({**_FOLDER, "email": "email"}),
        ),
        "set_renew_option": ActionDefinition(
            command="set_folder_renew_option",
            description="Set renewal option for folder",
            params=f.shape(folderId=f.FOLDER_ID, renewOption=f.RENEW_OPTION),
            transform=tx.rename({**_FOLDER, "renewOption": "renew_option"}),
        ),
        "clear_settings": ActionDefinition(
            command="set_clear_folder_setting",
            description="Clear all folder settings",
            params=f.shape(folderId=f.FOLDER_ID),
            transform=tx.rename(_FOLDER),
        ),
    },
)
