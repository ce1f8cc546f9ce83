"""Зонд внешних USB-устройств."""

from __future__ import annotations

from probes.base import CommandProbe

# Стандартные контроллеры, хабы и HID отфильтровываются: в отчёт попадает
# только то, что пользователь воткнул сам
USB_DEVICES_SCRIPT = """
$usbDevices = Get-PnpDevice -PresentOnly |
    Where-Object {
        $_.InstanceId -match '^USB' -and
        $_.FriendlyName -and
        $_.Manufacturer -and
        $_.Manufacturer -notmatch 'Standard system devices' -and
        $_.Manufacturer -notmatch 'Standard USB Host Controller' -and
        $_.Manufacturer -notmatch 'Standard USB HUBs' -and
        $_.Manufacturer -notmatch 'Generic USB Audio' -and
        $_.Class -notmatch 'HIDClass'
    } |
    Select-Object FriendlyName, Manufacturer, Class

if (!$usbDevices) {
    Write-Host "No external USB devices detected."
} else {
    $usbDevices | ForEach-Object {
        Write-Host ("• " + $_.FriendlyName)
        Write-Host ("    Manufacturer: " + $_.Manufacturer)
        if ($_.Class) { Write-Host ("    Type:         " + $_.Class) }
        Write-Host ""
    }
}
"""


class UsbDevices(CommandProbe):
    """Список внешних USB-устройств в виде маркированного списка."""

    name = "usb"
    platform = "win"
    order = 80
    description = "Get external USB devices"
    command = USB_DEVICES_SCRIPT
